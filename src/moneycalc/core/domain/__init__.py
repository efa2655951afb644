"""
Domain value objects.

Contains Rate, MonetaryAmount and RateAndPeriods.
"""

from moneycalc.core.domain.money import MonetaryAmount
from moneycalc.core.domain.rate import Rate
from moneycalc.core.domain.rate_and_periods import RateAndPeriods

__all__ = [
    "MonetaryAmount",
    "Rate",
    "RateAndPeriods",
]
