"""
Present Value

The present value formula discounts a future cash amount back to today:

    PV = amount / (1 + r)^n
"""

from moneycalc.core.domain import MonetaryAmount, Rate
from moneycalc.core.math.compounding import discount_factor
from moneycalc.functions.base import RatePeriodsOperator, rate_periods_amount_type


def present_value(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
    """
    Args:
        amount: Future amount
        rate: Discount rate per period
        periods: Number of periods (>= 0)

    Returns:
        amount / (1 + r)^n

    Raises:
        RateDomainViolation: if 1 + r <= 0
    """
    return amount.multiply(discount_factor(Rate.of(rate).get(), periods))


class PresentValue(RatePeriodsOperator):
    """Present value with fixed rate and periods."""

    INPUT_TYPE = rate_periods_amount_type("present_value")

    @staticmethod
    def evaluate(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
        return present_value(amount, rate, periods)
