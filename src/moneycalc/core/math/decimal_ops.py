"""
Decimal Operations — Safe Arbitrary-Precision Primitives

All monetary and rate arithmetic in moneycalc runs on ``decimal.Decimal``
inside one context, the immutable default or a per-call override:
- Conversion of int/float/str/Decimal inputs to Decimal (floats via str)
- Finite-value checks (NaN/Infinity never enter a calculation)
- Division with an explicit zero-divisor policy
- Integer powers, including negative exponents
- Tolerance comparisons for tests and diagnostics

CRITICAL INVARIANTS:
1. Division by zero never produces Infinity/NaN (either raises or returns
   an explicit fallback chosen by the caller)
2. Every operation uses the same context (precision + rounding)
3. All operations are deterministic and reproducible
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from typing import Final, Optional, Union

# =============================================================================
# CONTEXT PARAMETERS
# =============================================================================

# 34 significant digits, banker's rounding (IEEE 754 decimal128)
DECIMAL_PRECISION: Final[int] = 34
DECIMAL_ROUNDING: Final[str] = ROUND_HALF_EVEN

# Default tolerance for is_close comparisons
DECIMAL_COMPARE_ABS: Final[Decimal] = Decimal("1e-12")

DecimalLike = Union[Decimal, int, float, str]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DecimalConfig:
    """Precision and rounding used for all calculations."""

    precision: int = DECIMAL_PRECISION
    rounding: str = DECIMAL_ROUNDING

    def __post_init__(self):
        if self.precision < 1:
            raise ValueError(f"precision must be positive, got {self.precision}")

    def context(self) -> Context:
        """Fresh decimal context for this configuration."""
        return Context(prec=self.precision, rounding=self.rounding)


# Immutable default; other settings are passed per call as `config`
DEFAULT_DECIMAL_CONFIG: Final[DecimalConfig] = DecimalConfig()


def get_decimal_config() -> DecimalConfig:
    """Default configuration used when no `config` is passed."""
    return DEFAULT_DECIMAL_CONFIG


def _context(config: Optional[DecimalConfig]) -> Context:
    return (config or DEFAULT_DECIMAL_CONFIG).context()


# =============================================================================
# CONVERSION
# =============================================================================


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Conversion of a numeric input to Decimal.

    Floats are converted through their shortest repr so that ``0.05`` becomes
    ``Decimal("0.05")`` and not the exact binary expansion.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Finite Decimal

    Raises:
        ValueError: if the value is NaN/Infinity or not a number
        TypeError: if the value has an unsupported type (bool included)

    Examples:
        >>> to_decimal(0.05)
        Decimal('0.05')
        >>> to_decimal("1.25")
        Decimal('1.25')
    """
    if isinstance(value, bool):
        raise TypeError(f"Boolean is not a numeric value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a decimal number: {value!r}")
    else:
        raise TypeError(f"Unsupported numeric type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Value contains NaN/Inf: {value!r}")

    return result


def is_valid_decimal(value: Decimal) -> bool:
    """True if value is finite (not NaN, not Infinity)."""
    return value.is_finite()


# =============================================================================
# ARITHMETIC
# =============================================================================


def add(a: Decimal, b: Decimal, config: Optional[DecimalConfig] = None) -> Decimal:
    return _context(config).add(a, b)


def subtract(a: Decimal, b: Decimal, config: Optional[DecimalConfig] = None) -> Decimal:
    return _context(config).subtract(a, b)


def multiply(a: Decimal, b: Decimal, config: Optional[DecimalConfig] = None) -> Decimal:
    return _context(config).multiply(a, b)


def safe_divide(
    numerator: Decimal,
    denominator: Decimal,
    fallback: Optional[Decimal] = None,
    config: Optional[DecimalConfig] = None,
) -> Decimal:
    """
    Division with an explicit zero-divisor policy.

    Args:
        numerator: Numerator
        denominator: Denominator
        fallback: Result for a zero denominator. If None, the zero
            denominator is an error.
        config: Context override (default: process-wide config)

    Returns:
        numerator / denominator, or fallback for a zero denominator

    Raises:
        ZeroDivisionError: if denominator is zero and no fallback is given

    Examples:
        >>> safe_divide(Decimal(10), Decimal(4))
        Decimal('2.5')
        >>> safe_divide(Decimal(10), Decimal(0), fallback=Decimal(0))
        Decimal('0')
    """
    if denominator.is_zero():
        if fallback is None:
            raise ZeroDivisionError(f"Division by zero: {numerator} / {denominator}")
        return fallback

    return _context(config).divide(numerator, denominator)


def power(base: Decimal, exponent: int, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Integer power base^exponent.

    Negative exponents are evaluated as 1 / base^|exponent|.

    Raises:
        TypeError: if exponent is not an int
        ZeroDivisionError: if base is zero and exponent is negative
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"exponent must be int, got {type(exponent).__name__}")

    ctx = _context(config)

    if exponent >= 0:
        return ctx.power(base, exponent)

    if base.is_zero():
        raise ZeroDivisionError(f"Zero base with negative exponent {exponent}")

    return ctx.divide(Decimal(1), ctx.power(base, -exponent))


# =============================================================================
# COMPARISONS
# =============================================================================


def is_close(a: Decimal, b: Decimal, abs_tol: Decimal = DECIMAL_COMPARE_ABS) -> bool:
    """
    Absolute-tolerance comparison.

    Examples:
        >>> is_close(Decimal("1.0"), Decimal("1.0000000000001"))
        True
        >>> is_close(Decimal("1.0"), Decimal("1.1"))
        False
    """
    return abs(a - b) <= abs_tol


def is_zero(value: Decimal) -> bool:
    return value.is_zero()
