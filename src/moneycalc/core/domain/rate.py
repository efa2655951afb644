"""
Rate — Interest/Discount Rate Value Type

Immutable Pydantic model wrapping a decimal fraction (0.05 = 5%).
Negative rates are valid; the growth-base domain (1 + r > 0) is enforced
by the formulas that compound, not by the value type.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from moneycalc.core.math.decimal_ops import DecimalLike, to_decimal


class Rate(BaseModel):
    """
    Rate as a decimal fraction.

    Immutable model (frozen=True). Use Rate.of(...) for plain numeric input.
    """

    value: Decimal = Field(..., description="Rate as a fraction (0.05 = 5%)")

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any) -> Any:
        """Floats go through repr so 0.05 stays 0.05."""
        if isinstance(v, (int, float, str)) and not isinstance(v, bool):
            return to_decimal(v)
        return v

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError(f"rate must be finite, got {v}")
        return v

    @classmethod
    def of(cls, value: "DecimalLike | Rate") -> "Rate":
        """
        Args:
            value: Rate instance or numeric fraction

        Returns:
            Rate
        """
        if isinstance(value, Rate):
            return value
        return cls(value=to_decimal(value))

    def get(self) -> Decimal:
        """Rate as a Decimal fraction."""
        return self.value

    def __str__(self) -> str:
        return f"{(self.value * 100).normalize():f}%"
