"""
Future Value

The future value formula gives the value of a cash amount at a later date,
after compounding at a given rate for a number of periods:

    FV = amount × (1 + r)^n
"""

from moneycalc.core.domain import MonetaryAmount, Rate
from moneycalc.core.math.compounding import growth_factor
from moneycalc.functions.base import RatePeriodsOperator, rate_periods_amount_type


def future_value(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
    """
    Args:
        amount: Present amount
        rate: Rate per period
        periods: Number of periods (>= 0)

    Returns:
        amount × (1 + r)^n

    Raises:
        RateDomainViolation: if 1 + r <= 0
    """
    return amount.multiply(growth_factor(Rate.of(rate).get(), periods))


class FutureValue(RatePeriodsOperator):
    """Future value with fixed rate and periods."""

    INPUT_TYPE = rate_periods_amount_type("future_value")

    @staticmethod
    def evaluate(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
        return future_value(amount, rate, periods)
