"""
Compound arguments: typed argument bundles and the functions consuming them.
"""

from moneycalc.core.compound.errors import (
    CurrencyMismatchError,
    InvalidArgumentError,
    InvalidConstructionParameterError,
    InvalidInputTypeError,
    MissingArgumentError,
    TypeMismatchError,
)
from moneycalc.core.compound.function import CompoundFunction, MonetaryOperator
from moneycalc.core.compound.types import ArgSpec, CompoundType, matches_type
from moneycalc.core.compound.value import CompoundValue

__all__ = [
    # Errors
    "CurrencyMismatchError",
    "InvalidArgumentError",
    "InvalidConstructionParameterError",
    "InvalidInputTypeError",
    "MissingArgumentError",
    "TypeMismatchError",
    # Descriptor / value
    "ArgSpec",
    "CompoundType",
    "CompoundValue",
    "matches_type",
    # Functions
    "CompoundFunction",
    "MonetaryOperator",
]
