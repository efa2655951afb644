"""
CompoundFunction — Contract implemented by every formula

A compound function exposes:
- input_type: the CompoundType it requires
- result_type: the class of its result
- calculate(value): validates the value's descriptor, then computes

MonetaryOperator is the simple operator form: a formula with fixed
construction parameters applied to a single monetary amount.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Type, TypeVar

from moneycalc.core.compound.errors import InvalidInputTypeError
from moneycalc.core.compound.types import CompoundType
from moneycalc.core.compound.value import CompoundValue

if TYPE_CHECKING:
    from moneycalc.core.domain.money import MonetaryAmount

logger = logging.getLogger(__name__)

R = TypeVar("R")


class CompoundFunction(ABC, Generic[R]):
    """
    Formula driven by a CompoundValue.

    Subclasses provide input_type, result_type and _calculate(). The
    descriptor check lives here so every formula enforces it identically.
    """

    @property
    @abstractmethod
    def input_type(self) -> CompoundType:
        """Descriptor of the arguments calculate() requires."""

    @property
    @abstractmethod
    def result_type(self) -> Type[R]:
        """Class of the value calculate() returns."""

    @abstractmethod
    def _calculate(self, value: CompoundValue) -> R:
        """Formula body; value is already checked against input_type."""

    def calculate(self, value: CompoundValue) -> R:
        """
        Evaluate the formula on a compound value.

        Args:
            value: Arguments built against input_type

        Returns:
            Result of type result_type

        Raises:
            InvalidInputTypeError: if value was built against a different
                descriptor
        """
        if not isinstance(value, CompoundValue):
            raise InvalidInputTypeError(self.input_type, type(value))
        if value.compound_type != self.input_type:
            raise InvalidInputTypeError(self.input_type, value.compound_type)

        logger.debug("%s.calculate(%r)", type(self).__name__, value)
        return self._calculate(value)


class MonetaryOperator(ABC):
    """Unary operation on a monetary amount (MonetaryAmount → MonetaryAmount)."""

    @abstractmethod
    def apply(self, amount: "MonetaryAmount") -> "MonetaryAmount":
        """Apply the operation to amount."""

    def __call__(self, amount: "MonetaryAmount") -> "MonetaryAmount":
        return self.apply(amount)
