"""
Core math modules for moneycalc

Decimal primitives and compounding factors with explicit boundary rules.
"""

# Decimal operations
from moneycalc.core.math.decimal_ops import (
    # Context parameters
    DECIMAL_COMPARE_ABS,
    DECIMAL_PRECISION,
    DECIMAL_ROUNDING,
    # Config
    DecimalConfig,
    DEFAULT_DECIMAL_CONFIG,
    get_decimal_config,
    # Conversion
    is_valid_decimal,
    to_decimal,
    # Arithmetic
    add,
    multiply,
    power,
    safe_divide,
    subtract,
    # Comparisons
    is_close,
    is_zero,
)

# Compounding
from moneycalc.core.math.compounding import (
    RateDomainViolation,
    discount_factor,
    future_value_annuity_factor,
    growth_factor,
    present_value_annuity_factor,
    safe_compound_rate,
    validate_periods,
)

__all__ = [
    # Decimal operations — Context parameters
    "DECIMAL_COMPARE_ABS",
    "DECIMAL_PRECISION",
    "DECIMAL_ROUNDING",
    # Decimal operations — Config
    "DecimalConfig",
    "DEFAULT_DECIMAL_CONFIG",
    "get_decimal_config",
    # Decimal operations — Conversion
    "is_valid_decimal",
    "to_decimal",
    # Decimal operations — Arithmetic
    "add",
    "multiply",
    "power",
    "safe_divide",
    "subtract",
    # Decimal operations — Comparisons
    "is_close",
    "is_zero",
    # Compounding — Exceptions
    "RateDomainViolation",
    # Compounding — Functions
    "discount_factor",
    "future_value_annuity_factor",
    "growth_factor",
    "present_value_annuity_factor",
    "safe_compound_rate",
    "validate_periods",
]
