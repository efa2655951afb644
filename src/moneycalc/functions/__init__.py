"""
Formula library.

Every formula is usable directly (module function or apply()) and as a
CompoundFunction driven by a CompoundValue.
"""

from moneycalc.functions.base import (
    ARG_AMOUNT,
    ARG_PERIODS,
    ARG_RATE,
    PerShareRatio,
    RatePeriodsFactor,
    RatePeriodsOperator,
    rate_periods_amount_type,
    rate_periods_type,
)

__all__ = [
    "ARG_AMOUNT",
    "ARG_PERIODS",
    "ARG_RATE",
    "PerShareRatio",
    "RatePeriodsFactor",
    "RatePeriodsOperator",
    "rate_periods_amount_type",
    "rate_periods_type",
]
