"""
Annuities

An annuity is a series of equal periodic payments. Four formulas relate the
payment to its present or future value:

    PresentValueOfAnnuity   PV = P × (1 - (1 + r)^-n) / r
    FutureValueOfAnnuity    FV = P × ((1 + r)^n - 1) / r
    AnnuityPaymentPV        P  = PV × r / (1 - (1 + r)^-n)
    AnnuityPaymentFV        P  = FV × r / ((1 + r)^n - 1)

The payment formulas are evaluated as amount / annuity factor, so a zero rate
gives amount / n. Zero periods have no payment schedule and are rejected.
AnnuityPaymentPV is used for loans (the balance shrinks), AnnuityPaymentFV for
savings toward a target balance (the balance grows).
"""

from decimal import Decimal

from moneycalc.core.compound import InvalidArgumentError
from moneycalc.core.domain import MonetaryAmount, Rate
from moneycalc.core.math.compounding import (
    future_value_annuity_factor,
    present_value_annuity_factor,
)
from moneycalc.functions.base import ARG_PERIODS, RatePeriodsOperator, rate_periods_amount_type


def _payment(amount: MonetaryAmount, factor: Decimal, periods: int) -> MonetaryAmount:
    if periods == 0:
        raise InvalidArgumentError(
            "Annuity payment requires at least one period, got 0",
            name=ARG_PERIODS,
            expected=int,
        )
    return amount.divide(factor)


# =============================================================================
# VALUE OF AN ANNUITY
# =============================================================================


def present_value_of_annuity(payment: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
    """
    Args:
        payment: Periodic payment
        rate: Rate per period
        periods: Number of payments

    Returns:
        Present value of the payment stream (zero for zero periods)
    """
    return payment.multiply(present_value_annuity_factor(Rate.of(rate).get(), periods))


def future_value_of_annuity(payment: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
    """
    Args:
        payment: Periodic payment
        rate: Rate per period
        periods: Number of payments

    Returns:
        Value of the payment stream after the last payment
    """
    return payment.multiply(future_value_annuity_factor(Rate.of(rate).get(), periods))


class PresentValueOfAnnuity(RatePeriodsOperator):
    INPUT_TYPE = rate_periods_amount_type("present_value_of_annuity")

    @staticmethod
    def evaluate(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
        return present_value_of_annuity(amount, rate, periods)


class FutureValueOfAnnuity(RatePeriodsOperator):
    INPUT_TYPE = rate_periods_amount_type("future_value_of_annuity")

    @staticmethod
    def evaluate(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
        return future_value_of_annuity(amount, rate, periods)


# =============================================================================
# ANNUITY PAYMENT
# =============================================================================


def annuity_payment_pv(present_value: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
    """
    Payment of an annuity with a known present value.

    Args:
        present_value: Initial balance (e.g. loan principal)
        rate: Rate per period
        periods: Number of payments (>= 1)

    Returns:
        PV × r / (1 - (1 + r)^-n), or PV / n for a zero rate

    Raises:
        InvalidArgumentError: if periods == 0
    """
    factor = present_value_annuity_factor(Rate.of(rate).get(), periods)
    return _payment(present_value, factor, periods)


def annuity_payment_fv(future_value: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
    """
    Payment of an annuity with a known future value.

    Args:
        future_value: Target balance after the last payment
        rate: Rate per period
        periods: Number of payments (>= 1)

    Returns:
        FV × r / ((1 + r)^n - 1), or FV / n for a zero rate

    Raises:
        InvalidArgumentError: if periods == 0
    """
    factor = future_value_annuity_factor(Rate.of(rate).get(), periods)
    return _payment(future_value, factor, periods)


class AnnuityPaymentPV(RatePeriodsOperator):
    INPUT_TYPE = rate_periods_amount_type("annuity_payment_pv")

    @staticmethod
    def evaluate(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
        return annuity_payment_pv(amount, rate, periods)


class AnnuityPaymentFV(RatePeriodsOperator):
    """
    Annuity payment from a known future value.

    The compound form reads rate, periods and amount from the value; the
    fixed construction parameters only drive apply().
    """

    INPUT_TYPE = rate_periods_amount_type("annuity_payment_fv")

    @staticmethod
    def evaluate(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
        return annuity_payment_fv(amount, rate, periods)
