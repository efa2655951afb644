"""
Zero Coupon Bond Value

A zero coupon bond pays no coupons and one lump sum (the face value) at
maturity. It sells at a discount to face:

    value = face / (1 + r)^n

with n the number of years to maturity.
"""

from moneycalc.core.domain import MonetaryAmount, Rate
from moneycalc.core.math.compounding import discount_factor
from moneycalc.functions.base import RatePeriodsOperator, rate_periods_amount_type


def zero_coupon_bond_value(
    face: MonetaryAmount, rate: Rate, number_of_years_to_maturity: int
) -> MonetaryAmount:
    """
    Args:
        face: Face value paid at maturity
        rate: Yield per year
        number_of_years_to_maturity: Years until maturity (>= 0)

    Returns:
        Discounted face value

    Raises:
        RateDomainViolation: if 1 + r <= 0
    """
    return face.multiply(discount_factor(Rate.of(rate).get(), number_of_years_to_maturity))


class ZeroCouponBondValue(RatePeriodsOperator):
    AMOUNT_ARG = "face"
    PERIODS_ARG = "number_of_years_to_maturity"
    INPUT_TYPE = rate_periods_amount_type(
        "zero_coupon_bond_value", amount_arg=AMOUNT_ARG, periods_arg=PERIODS_ARG
    )

    @property
    def number_of_years_to_maturity(self) -> int:
        return self.periods

    @staticmethod
    def evaluate(face: MonetaryAmount, rate: Rate, number_of_years_to_maturity: int) -> MonetaryAmount:
        return zero_coupon_bond_value(face, rate, number_of_years_to_maturity)
