"""
Compounding — Growth and Discount Factors

Safe evaluation of the time-value-of-money building blocks:
- Domain restriction for the growth base: 1 + r > 0
- Compound (growth) factor (1 + r)^n
- Discount factor 1 / (1 + r)^n
- Annuity factors with explicit boundary results

CRITICAL INVARIANTS:
1. Domain violation (1 + r <= 0) → RateDomainViolation exception
2. periods must be a non-negative int
3. Annuity factors never divide by zero:
   - periods == 0 → 0
   - rate == 0 → periods (limit of the factor as r → 0)

FORMULAS:
    growth_factor(r, n)   = (1 + r)^n
    discount_factor(r, n) = (1 + r)^-n
    PVAF(r, n) = (1 - (1 + r)^-n) / r
    FVAF(r, n) = ((1 + r)^n - 1) / r
"""

from decimal import Decimal
from typing import Optional

from moneycalc.core.math.decimal_ops import (
    DecimalConfig,
    add,
    power,
    safe_divide,
    subtract,
)

ONE = Decimal(1)
ZERO = Decimal(0)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RateDomainViolation(ArithmeticError):
    """
    Growth base 1 + r is not positive.

    A rate of -100% or below makes (1 + r)^n either zero or alternate in sign,
    so no discounting or compounding formula is defined for it.
    """

    def __init__(self, rate: Decimal):
        self.rate = rate
        super().__init__(f"Compounding domain violation: 1 + r <= 0 for r={rate}")


# =============================================================================
# DOMAIN CHECKS
# =============================================================================


def safe_compound_rate(rate: Decimal) -> Decimal:
    """
    Domain check for the growth base.

    Args:
        rate: Rate as a fraction (0.05 = 5%)

    Returns:
        rate unchanged if 1 + rate > 0

    Raises:
        RateDomainViolation: if 1 + rate <= 0
    """
    if ONE + rate <= ZERO:
        raise RateDomainViolation(rate)
    return rate


def validate_periods(periods: int) -> int:
    """
    Args:
        periods: Number of compounding periods

    Raises:
        TypeError: if periods is not an int
        ValueError: if periods is negative
    """
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise TypeError(f"periods must be int, got {type(periods).__name__}")
    if periods < 0:
        raise ValueError(f"periods cannot be negative: {periods}")
    return periods


# =============================================================================
# FACTORS
# =============================================================================


def growth_factor(rate: Decimal, periods: int, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Compound factor (1 + r)^n.

    Examples:
        >>> growth_factor(Decimal("0.1"), 2)
        Decimal('1.21')
    """
    validate_periods(periods)
    safe_compound_rate(rate)
    return power(add(ONE, rate, config), periods, config)


def discount_factor(rate: Decimal, periods: int, config: Optional[DecimalConfig] = None) -> Decimal:
    """
    Discount factor 1 / (1 + r)^n.

    Examples:
        >>> discount_factor(Decimal("0.25"), 1)
        Decimal('0.8')
    """
    validate_periods(periods)
    safe_compound_rate(rate)
    return power(add(ONE, rate, config), -periods, config)


def present_value_annuity_factor(
    rate: Decimal, periods: int, config: Optional[DecimalConfig] = None
) -> Decimal:
    """
    Present value of an annuity factor (PVAF).

    PVAF(r, n) = (1 - (1 + r)^-n) / r

    Boundary results:
        1 + r <= 0 → RateDomainViolation, for any n
        n == 0 → 0 (no payments)
        r == 0, or 1 + r == 1 at the working precision → n

    Examples:
        >>> present_value_annuity_factor(Decimal("0.05"), 0)
        Decimal('0')
        >>> present_value_annuity_factor(Decimal("0"), 12)
        Decimal('12')
    """
    validate_periods(periods)
    safe_compound_rate(rate)
    if periods == 0:
        return ZERO
    if rate.is_zero():
        return Decimal(periods)

    numerator = subtract(ONE, discount_factor(rate, periods, config), config)
    if numerator.is_zero():
        # 1 + r rounds to 1 at the working precision
        return Decimal(periods)
    return safe_divide(numerator, rate, config=config)


def future_value_annuity_factor(
    rate: Decimal, periods: int, config: Optional[DecimalConfig] = None
) -> Decimal:
    """
    Future value of an annuity factor (FVAF).

    FVAF(r, n) = ((1 + r)^n - 1) / r

    Boundary results match present_value_annuity_factor.
    """
    validate_periods(periods)
    safe_compound_rate(rate)
    if periods == 0:
        return ZERO
    if rate.is_zero():
        return Decimal(periods)

    numerator = subtract(growth_factor(rate, periods, config), ONE, config)
    if numerator.is_zero():
        # 1 + r rounds to 1 at the working precision
        return Decimal(periods)
    return safe_divide(numerator, rate, config=config)
