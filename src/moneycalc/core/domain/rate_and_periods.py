"""
RateAndPeriods — Rate paired with a number of periods

Input of the factor-style formulas (growth/discount/annuity factors).
"""

from pydantic import BaseModel, Field

from moneycalc.core.domain.rate import Rate
from moneycalc.core.math.decimal_ops import DecimalLike


class RateAndPeriods(BaseModel):
    """Immutable (rate, periods) pair."""

    rate: Rate = Field(..., description="Rate per period")
    periods: int = Field(..., ge=0, description="Number of periods (non-negative)")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, rate: "DecimalLike | Rate", periods: int) -> "RateAndPeriods":
        """
        Examples:
            >>> RateAndPeriods.of(0.05, 10).periods
            10
        """
        return cls(rate=Rate.of(rate), periods=periods)
