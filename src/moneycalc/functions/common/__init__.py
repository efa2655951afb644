"""
Common time-value-of-money formulas.
"""

from .annuity import (
    AnnuityPaymentFV,
    AnnuityPaymentPV,
    FutureValueOfAnnuity,
    PresentValueOfAnnuity,
    annuity_payment_fv,
    annuity_payment_pv,
    future_value_of_annuity,
    present_value_of_annuity,
)
from .factors import (
    FutureValueFactor,
    FutureValueOfAnnuityPaymentFactor,
    PresentValueFactor,
    PresentValueOfAnnuityPaymentFactor,
)
from .future_value import FutureValue, future_value
from .present_value import PresentValue, present_value

__all__ = [
    # Classes
    "AnnuityPaymentFV",
    "AnnuityPaymentPV",
    "FutureValue",
    "FutureValueFactor",
    "FutureValueOfAnnuity",
    "FutureValueOfAnnuityPaymentFactor",
    "PresentValue",
    "PresentValueFactor",
    "PresentValueOfAnnuity",
    "PresentValueOfAnnuityPaymentFactor",
    # Functions
    "annuity_payment_fv",
    "annuity_payment_pv",
    "future_value",
    "future_value_of_annuity",
    "present_value",
    "present_value_of_annuity",
]
