"""
Formula bases shared by the function library.

Three shapes cover every formula:
- RatePeriodsOperator: fixed (rate, periods), applied to a MonetaryAmount
- RatePeriodsFactor: pure factor of (rate, periods), Decimal result
- PerShareRatio: fixed share count, applied to a MonetaryAmount

Each shape is both a MonetaryOperator/callable (direct form) and a
CompoundFunction (generic form).
"""

import logging
from abc import abstractmethod
from decimal import Decimal
from typing import Any, ClassVar, Type

from moneycalc.core.compound import (
    CompoundFunction,
    CompoundType,
    CompoundValue,
    InvalidArgumentError,
    InvalidConstructionParameterError,
    MonetaryOperator,
)
from moneycalc.core.domain import MonetaryAmount, Rate, RateAndPeriods

logger = logging.getLogger(__name__)

# =============================================================================
# ARGUMENT NAMES
# =============================================================================

ARG_RATE = "rate"
ARG_PERIODS = "periods"
ARG_AMOUNT = "amount"


def rate_periods_type(key: str) -> CompoundType:
    """Descriptor (rate: Rate, periods: int)."""
    return (
        CompoundType.builder()
        .with_id(key)
        .with_required_arg(ARG_RATE, Rate)
        .with_required_arg(ARG_PERIODS, int)
        .build()
    )


def rate_periods_amount_type(
    key: str, amount_arg: str = ARG_AMOUNT, periods_arg: str = ARG_PERIODS
) -> CompoundType:
    """Descriptor (rate: Rate, periods: int, amount: MonetaryAmount)."""
    return (
        CompoundType.builder()
        .with_id(key)
        .with_required_arg(ARG_RATE, Rate)
        .with_required_arg(periods_arg, int)
        .with_required_arg(amount_arg, MonetaryAmount)
        .build()
    )


def check_rate(rate: Any) -> Rate:
    """
    Construction-time rate check.

    Raises:
        InvalidConstructionParameterError: if rate is None or not numeric
    """
    if rate is None:
        raise InvalidConstructionParameterError("rate", rate, "must not be None")
    try:
        return Rate.of(rate)
    except (TypeError, ValueError) as e:
        raise InvalidConstructionParameterError("rate", rate, f"is not a valid rate ({e})") from e


def check_count(parameter: str, value: Any, minimum: int) -> int:
    """
    Construction-time integer check.

    Raises:
        InvalidConstructionParameterError: if value is not an int >= minimum
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConstructionParameterError(parameter, value, "must be an int")
    if value < minimum:
        raise InvalidConstructionParameterError(parameter, value, f"must be >= {minimum}")
    return value


def check_periods(name: str, periods: int) -> int:
    """
    Call-time periods check for the compound form.

    Raises:
        InvalidArgumentError: if periods is negative
    """
    if periods < 0:
        raise InvalidArgumentError(
            f"{name} cannot be negative: {periods}", name=name, expected=int
        )
    return periods


def check_share_count(name: str, shares: int) -> int:
    """
    Call-time share count check for the per-share formulas.

    Raises:
        InvalidArgumentError: if shares is not a positive int
    """
    if isinstance(shares, bool) or not isinstance(shares, int) or shares <= 0:
        raise InvalidArgumentError(
            f"{name} must be a positive int, got {shares!r}", name=name, expected=int
        )
    return shares


# =============================================================================
# RATE / PERIODS OPERATOR
# =============================================================================


class RatePeriodsOperator(MonetaryOperator, CompoundFunction[MonetaryAmount]):
    """
    MonetaryAmount formula with a fixed rate and number of periods.

    Subclasses set INPUT_TYPE and implement evaluate(). The compound form
    reads all three arguments from the value, ignoring the fixed ones.
    """

    INPUT_TYPE: ClassVar[CompoundType]
    AMOUNT_ARG: ClassVar[str] = ARG_AMOUNT
    PERIODS_ARG: ClassVar[str] = ARG_PERIODS

    def __init__(self, rate: Rate, periods: int):
        self._rate = check_rate(rate)
        self._periods = check_count(self.PERIODS_ARG, periods, 0)

    @classmethod
    def of(cls, rate: Rate, periods: int):
        return cls(rate, periods)

    @property
    def rate(self) -> Rate:
        return self._rate

    @property
    def periods(self) -> int:
        return self._periods

    @property
    def input_type(self) -> CompoundType:
        return self.INPUT_TYPE

    @property
    def result_type(self) -> Type[MonetaryAmount]:
        return MonetaryAmount

    @staticmethod
    @abstractmethod
    def evaluate(amount: MonetaryAmount, rate: Rate, periods: int) -> MonetaryAmount:
        """Closed-form formula."""

    def apply(self, amount: MonetaryAmount) -> MonetaryAmount:
        logger.debug("%s.apply(%s) rate=%s periods=%d", type(self).__name__, amount, self._rate, self._periods)
        return self.evaluate(amount, self._rate, self._periods)

    def _calculate(self, value: CompoundValue) -> MonetaryAmount:
        return self.evaluate(
            value.get(self.AMOUNT_ARG, MonetaryAmount),
            value.get(ARG_RATE, Rate),
            check_periods(self.PERIODS_ARG, value.get(self.PERIODS_ARG, int)),
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rate == other._rate and self._periods == other._periods

    def __hash__(self) -> int:
        return hash((type(self), self._rate, self._periods))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rate={self._rate}, {self.PERIODS_ARG}={self._periods})"


# =============================================================================
# RATE / PERIODS FACTOR
# =============================================================================


class RatePeriodsFactor(CompoundFunction[Decimal]):
    """
    Dimensionless factor of (rate, periods).

    Stateless; apply() takes a RateAndPeriods, calculate() a CompoundValue.
    """

    INPUT_TYPE: ClassVar[CompoundType]

    @property
    def input_type(self) -> CompoundType:
        return self.INPUT_TYPE

    @property
    def result_type(self) -> Type[Decimal]:
        return Decimal

    @staticmethod
    @abstractmethod
    def evaluate(rate_and_periods: RateAndPeriods) -> Decimal:
        """Closed-form factor."""

    def apply(self, rate_and_periods: RateAndPeriods) -> Decimal:
        return self.evaluate(rate_and_periods)

    def __call__(self, rate_and_periods: RateAndPeriods) -> Decimal:
        return self.apply(rate_and_periods)

    def _calculate(self, value: CompoundValue) -> Decimal:
        rate = value.get(ARG_RATE, Rate)
        periods = check_periods(ARG_PERIODS, value.get(ARG_PERIODS, int))
        return self.evaluate(RateAndPeriods(rate=rate, periods=periods))

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# =============================================================================
# PER-SHARE RATIO
# =============================================================================


class PerShareRatio(MonetaryOperator, CompoundFunction[MonetaryAmount]):
    """
    amount / shares with a fixed share count.

    Subclasses set INPUT_TYPE, AMOUNT_ARG and SHARES_ARG.
    """

    INPUT_TYPE: ClassVar[CompoundType]
    AMOUNT_ARG: ClassVar[str]
    SHARES_ARG: ClassVar[str]

    def __init__(self, shares: int):
        self._shares = check_count(self.SHARES_ARG, shares, 1)

    @classmethod
    def of(cls, shares: int):
        return cls(shares)

    @property
    def shares(self) -> int:
        return self._shares

    @property
    def input_type(self) -> CompoundType:
        return self.INPUT_TYPE

    @property
    def result_type(self) -> Type[MonetaryAmount]:
        return MonetaryAmount

    @classmethod
    def evaluate(cls, amount: MonetaryAmount, shares: int) -> MonetaryAmount:
        """
        Raises:
            InvalidArgumentError: if shares is not a positive int
        """
        return amount.divide(check_share_count(cls.SHARES_ARG, shares))

    def apply(self, amount: MonetaryAmount) -> MonetaryAmount:
        return self.evaluate(amount, self._shares)

    def _calculate(self, value: CompoundValue) -> MonetaryAmount:
        return self.evaluate(
            value.get(self.AMOUNT_ARG, MonetaryAmount),
            value.get(self.SHARES_ARG, int),
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._shares == other._shares

    def __hash__(self) -> int:
        return hash((type(self), self._shares))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.SHARES_ARG}={self._shares})"
