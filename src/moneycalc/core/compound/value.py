"""
CompoundValue — Type-checked bundle of named argument values

A compound value is built against a CompoundType and validated at build
time:
- every required argument present (None counts as missing)
- no undeclared names
- every value an instance of its declared type

Once built it is immutable; to change an argument rebuild with
value.to_builder().
"""

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Type, TypeVar

from moneycalc.core.compound.errors import (
    InvalidArgumentError,
    MissingArgumentError,
    TypeMismatchError,
)
from moneycalc.core.compound.types import CompoundType, matches_type

T = TypeVar("T")


class CompoundValue:
    """Immutable mapping name → value conforming to a CompoundType."""

    __slots__ = ("_compound_type", "_values")

    def __init__(self, compound_type: CompoundType, values: Mapping[str, Any]):
        object.__setattr__(self, "_compound_type", compound_type)
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def builder(cls, compound_type: CompoundType) -> "CompoundValue.Builder":
        return cls.Builder(compound_type)

    @classmethod
    def of(cls, compound_type: CompoundType, **values: Any) -> "CompoundValue":
        """Shortcut for builder(compound_type).set_all(values).build()."""
        return cls.Builder(compound_type).set_all(values).build()

    # =========================================================================
    # READ API
    # =========================================================================

    @property
    def compound_type(self) -> CompoundType:
        """Descriptor this value was built against."""
        return self._compound_type

    def get(self, name: str, expected_type: Type[T]) -> T:
        """
        Typed access to an argument.

        Args:
            name: Argument name
            expected_type: Class the caller expects

        Returns:
            The stored value

        Raises:
            MissingArgumentError: if the argument is absent
            TypeMismatchError: if the stored value is not an expected_type
        """
        if name not in self._values:
            raise MissingArgumentError(name, self._compound_type)

        value = self._values[name]
        if not matches_type(value, expected_type):
            raise TypeMismatchError(name, expected_type, type(value))
        return value

    def get_optional(self, name: str, expected_type: Type[T], default: Optional[T] = None) -> Optional[T]:
        """Like get(), but returns default for an absent argument."""
        if name not in self._values:
            return default
        return self.get(name, expected_type)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._values)

    def as_dict(self) -> Dict[str, Any]:
        """Copy of the argument mapping."""
        return dict(self._values)

    def to_builder(self) -> "CompoundValue.Builder":
        """New builder pre-filled with this value's arguments."""
        return CompoundValue.Builder(self._compound_type).set_all(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundValue):
            return NotImplemented
        return (
            self._compound_type == other._compound_type
            and dict(self._values) == dict(other._values)
        )

    __hash__ = None  # values may be unhashable

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"CompoundValue({self._compound_type.key}: {args})"

    # =========================================================================
    # BUILDER
    # =========================================================================

    class Builder:
        """Accumulates name → value pairs, validated in build()."""

        def __init__(self, compound_type: CompoundType):
            if not isinstance(compound_type, CompoundType):
                raise InvalidArgumentError(
                    f"Expected CompoundType, got {type(compound_type).__name__}"
                )
            self._compound_type = compound_type
            self._values: Dict[str, Any] = {}

        def set(self, name: str, value: Any) -> "CompoundValue.Builder":
            self._values[name] = value
            return self

        with_value = set

        def set_all(self, values: Mapping[str, Any]) -> "CompoundValue.Builder":
            for name, value in values.items():
                self.set(name, value)
            return self

        def build(self) -> "CompoundValue":
            """
            Raises:
                InvalidArgumentError: on a missing required argument, an
                    undeclared name or a value of the wrong type
            """
            compound_type = self._compound_type
            values: Dict[str, Any] = {}

            for name, value in self._values.items():
                spec = compound_type.args.get(name)
                if spec is None:
                    raise InvalidArgumentError(
                        f"Argument '{name}' is not declared in {compound_type!r}",
                        name=name,
                    )
                if value is None:
                    # None means "not supplied"; required check below
                    continue
                if not matches_type(value, spec.type):
                    raise InvalidArgumentError(
                        f"Argument '{name}' must be {spec.type.__name__}, "
                        f"got {type(value).__name__}",
                        name=name,
                        expected=spec.type,
                        actual=type(value),
                    )
                values[name] = value

            for name in compound_type.required_args:
                if name not in values:
                    raise InvalidArgumentError(
                        f"Missing required argument '{name}' for {compound_type!r}",
                        name=name,
                        expected=compound_type.arg_type(name),
                    )

            return CompoundValue(compound_type, values)
