"""
moneycalc — financial formula calculators over typed argument bundles.

Formulas (annuities, present/future value, per-share ratios, bond value)
are pure functions usable directly or through the CompoundFunction contract:
a CompoundType declares named, typed arguments, a CompoundValue carries them,
and calculate() checks the value against the declared type before computing.
"""

import logging

from moneycalc.core.compound import (
    CompoundFunction,
    CompoundType,
    CompoundValue,
    CurrencyMismatchError,
    InvalidArgumentError,
    InvalidConstructionParameterError,
    InvalidInputTypeError,
    MissingArgumentError,
    MonetaryOperator,
    TypeMismatchError,
)
from moneycalc.core.domain import MonetaryAmount, Rate, RateAndPeriods
from moneycalc.core.math import RateDomainViolation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CompoundFunction",
    "CompoundType",
    "CompoundValue",
    "CurrencyMismatchError",
    "InvalidArgumentError",
    "InvalidConstructionParameterError",
    "InvalidInputTypeError",
    "MissingArgumentError",
    "MonetaryAmount",
    "MonetaryOperator",
    "Rate",
    "RateAndPeriods",
    "RateDomainViolation",
    "TypeMismatchError",
]
