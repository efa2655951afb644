"""
MonetaryAmount — Currency-Tagged Decimal Amount

Immutable Pydantic model: a Decimal number plus an ISO-4217 style currency
code. Every arithmetic operation returns a new instance.

Rules:
- add/subtract/compare only within the same currency (CurrencyMismatchError)
- multiply/divide by plain numbers (Decimal, int, float, numeric str)
- division by zero raises ZeroDivisionError, never produces Infinity
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from moneycalc.core.compound.errors import CurrencyMismatchError
from moneycalc.core.math.decimal_ops import (
    DecimalConfig,
    DecimalLike,
    add,
    multiply,
    safe_divide,
    subtract,
    to_decimal,
)


class MonetaryAmount(BaseModel):
    """
    Monetary amount.

    Immutable model (frozen=True). All changes create a new instance.
    """

    number: Decimal = Field(..., description="Numeric value of the amount")
    currency: str = Field(..., pattern="^[A-Z]{3}$", description="Currency code, e.g. 'GBP'")

    model_config = {"frozen": True}

    @field_validator("number", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Any:
        if isinstance(v, (int, float, str)) and not isinstance(v, bool):
            return to_decimal(v)
        return v

    @field_validator("number")
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError(f"amount must be finite, got {v}")
        return v

    @classmethod
    def of(cls, number: DecimalLike, currency: str) -> "MonetaryAmount":
        return cls(number=to_decimal(number), currency=currency)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _check_currency(self, other: "MonetaryAmount") -> None:
        if not isinstance(other, MonetaryAmount):
            raise TypeError(f"Expected MonetaryAmount, got {type(other).__name__}")
        if other.currency != self.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def _with_number(self, number: Decimal) -> "MonetaryAmount":
        return MonetaryAmount(number=number, currency=self.currency)

    def add(self, other: "MonetaryAmount", config: Optional[DecimalConfig] = None) -> "MonetaryAmount":
        self._check_currency(other)
        return self._with_number(add(self.number, other.number, config))

    def subtract(
        self, other: "MonetaryAmount", config: Optional[DecimalConfig] = None
    ) -> "MonetaryAmount":
        self._check_currency(other)
        return self._with_number(subtract(self.number, other.number, config))

    def multiply(self, factor: DecimalLike, config: Optional[DecimalConfig] = None) -> "MonetaryAmount":
        return self._with_number(multiply(self.number, to_decimal(factor), config))

    def divide(self, divisor: DecimalLike, config: Optional[DecimalConfig] = None) -> "MonetaryAmount":
        """
        Args:
            divisor: Plain number

        Raises:
            ZeroDivisionError: if divisor is zero
        """
        divisor = to_decimal(divisor)
        if divisor.is_zero():
            raise ZeroDivisionError(f"Cannot divide {self} by zero")
        return self._with_number(safe_divide(self.number, divisor, config=config))

    def negate(self) -> "MonetaryAmount":
        return self._with_number(-self.number)

    def is_zero(self) -> bool:
        return self.number.is_zero()

    def is_positive(self) -> bool:
        return self.number > 0

    def is_negative(self) -> bool:
        return self.number < 0

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: "MonetaryAmount") -> "MonetaryAmount":
        return self.add(other)

    def __sub__(self, other: "MonetaryAmount") -> "MonetaryAmount":
        return self.subtract(other)

    def __mul__(self, factor: DecimalLike) -> "MonetaryAmount":
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: DecimalLike) -> "MonetaryAmount":
        return self.divide(divisor)

    def __neg__(self) -> "MonetaryAmount":
        return self.negate()

    def __lt__(self, other: "MonetaryAmount") -> bool:
        self._check_currency(other)
        return self.number < other.number

    def __le__(self, other: "MonetaryAmount") -> bool:
        self._check_currency(other)
        return self.number <= other.number

    def __gt__(self, other: "MonetaryAmount") -> bool:
        self._check_currency(other)
        return self.number > other.number

    def __ge__(self, other: "MonetaryAmount") -> bool:
        self._check_currency(other)
        return self.number >= other.number

    def __str__(self) -> str:
        return f"{self.currency} {self.number}"
