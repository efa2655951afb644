"""
Time-Value-of-Money Factors

Dimensionless multipliers used by the amount formulas:

    FutureValueFactor                   (1 + r)^n
    PresentValueFactor                  1 / (1 + r)^n
    PresentValueOfAnnuityPaymentFactor  (1 - (1 + r)^-n) / r
    FutureValueOfAnnuityPaymentFactor   ((1 + r)^n - 1) / r

Annuity factors are 0 for zero periods (for any rate) and n for a zero rate.
"""

from decimal import Decimal

from moneycalc.core.domain import RateAndPeriods
from moneycalc.core.math.compounding import (
    discount_factor,
    future_value_annuity_factor,
    growth_factor,
    present_value_annuity_factor,
)
from moneycalc.functions.base import RatePeriodsFactor, rate_periods_type


class FutureValueFactor(RatePeriodsFactor):
    INPUT_TYPE = rate_periods_type("future_value_factor")

    @staticmethod
    def evaluate(rate_and_periods: RateAndPeriods) -> Decimal:
        return growth_factor(rate_and_periods.rate.get(), rate_and_periods.periods)


class PresentValueFactor(RatePeriodsFactor):
    INPUT_TYPE = rate_periods_type("present_value_factor")

    @staticmethod
    def evaluate(rate_and_periods: RateAndPeriods) -> Decimal:
        return discount_factor(rate_and_periods.rate.get(), rate_and_periods.periods)


class PresentValueOfAnnuityPaymentFactor(RatePeriodsFactor):
    """
    Present value of an annuity factor (PVAF).

    Examples:
        >>> PresentValueOfAnnuityPaymentFactor.evaluate(RateAndPeriods.of(0.05, 0))
        Decimal('0')
    """

    INPUT_TYPE = rate_periods_type("present_value_of_annuity_payment_factor")

    @staticmethod
    def evaluate(rate_and_periods: RateAndPeriods) -> Decimal:
        return present_value_annuity_factor(rate_and_periods.rate.get(), rate_and_periods.periods)


class FutureValueOfAnnuityPaymentFactor(RatePeriodsFactor):
    """Future value of an annuity factor (FVAF)."""

    INPUT_TYPE = rate_periods_type("future_value_of_annuity_payment_factor")

    @staticmethod
    def evaluate(rate_and_periods: RateAndPeriods) -> Decimal:
        return future_value_annuity_factor(rate_and_periods.rate.get(), rate_and_periods.periods)
