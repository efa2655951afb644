"""
CompoundType — Descriptor of a named, typed argument bundle

A descriptor declares which arguments a compound function needs:
- an identifying key (usually derived from the owning formula)
- a set of (name, type, required) declarations, names unique

Descriptors are immutable once built and compare structurally:
same key and same set of declarations, declaration order irrelevant,
names case-sensitive.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from moneycalc.core.compound.errors import InvalidArgumentError


def matches_type(value: Any, expected: type) -> bool:
    """
    Runtime type check used for argument validation.

    bool is not accepted where a number is declared, even though it is an
    int subclass.
    """
    if isinstance(value, bool) and expected is not bool:
        return False
    return isinstance(value, expected)


@dataclass(frozen=True)
class ArgSpec:
    """Declaration of a single named argument."""

    name: str
    type: type
    required: bool = True

    def __repr__(self) -> str:
        flag = "" if self.required else "?"
        return f"{self.name}{flag}: {self.type.__name__}"


class CompoundType:
    """
    Immutable descriptor of named, typed arguments.

    Build with CompoundType.builder():

        CompoundType.builder()
            .with_id("annuity_payment_fv")
            .with_required_arg("rate", Rate)
            .with_required_arg("periods", int)
            .build()
    """

    __slots__ = ("_key", "_args")

    def __init__(self, key: str, args: Mapping[str, ArgSpec]):
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_args", MappingProxyType(dict(args)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def builder(cls) -> "CompoundType.Builder":
        return cls.Builder()

    # =========================================================================
    # READ API
    # =========================================================================

    @property
    def key(self) -> str:
        return self._key

    @property
    def args(self) -> Mapping[str, ArgSpec]:
        """Read-only mapping name → ArgSpec."""
        return self._args

    @property
    def required_args(self) -> Tuple[str, ...]:
        return tuple(name for name, spec in self._args.items() if spec.required)

    @property
    def optional_args(self) -> Tuple[str, ...]:
        return tuple(name for name, spec in self._args.items() if not spec.required)

    def is_required(self, name: str) -> bool:
        return name in self._args and self._args[name].required

    def arg_type(self, name: str) -> Optional[type]:
        spec = self._args.get(name)
        return spec.type if spec is not None else None

    def __contains__(self, name: object) -> bool:
        return name in self._args

    def __iter__(self) -> Iterator[str]:
        return iter(self._args)

    def __len__(self) -> int:
        return len(self._args)

    # =========================================================================
    # EQUALITY
    # =========================================================================

    def _identity(self) -> Tuple[str, frozenset]:
        return (self._key, frozenset(self._args.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundType):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        args = ", ".join(repr(spec) for spec in self._args.values())
        return f"CompoundType({self._key}: [{args}])"

    # =========================================================================
    # BUILDER
    # =========================================================================

    class Builder:
        """Accumulates a key and argument declarations."""

        def __init__(self):
            self._key: Optional[str] = None
            self._args: Dict[str, ArgSpec] = {}

        def with_id(self, key: str) -> "CompoundType.Builder":
            if not isinstance(key, str) or not key:
                raise InvalidArgumentError(f"Descriptor key must be a non-empty string, got {key!r}")
            self._key = key
            return self

        def with_id_for_input(self, owner: type) -> "CompoundType.Builder":
            """Key derived from the owning formula class."""
            return self.with_id(f"{owner.__module__}.{owner.__qualname__}:input")

        def with_id_for_result(self, owner: type) -> "CompoundType.Builder":
            return self.with_id(f"{owner.__module__}.{owner.__qualname__}:result")

        def with_required_arg(self, name: str, arg_type: type) -> "CompoundType.Builder":
            return self._add(ArgSpec(name, arg_type, required=True))

        def with_optional_arg(self, name: str, arg_type: type) -> "CompoundType.Builder":
            return self._add(ArgSpec(name, arg_type, required=False))

        def _add(self, spec: ArgSpec) -> "CompoundType.Builder":
            if not isinstance(spec.name, str) or not spec.name:
                raise InvalidArgumentError(
                    f"Argument name must be a non-empty string, got {spec.name!r}"
                )
            if not isinstance(spec.type, type):
                raise InvalidArgumentError(
                    f"Argument '{spec.name}' type must be a class, got {spec.type!r}",
                    name=spec.name,
                )
            if spec.name in self._args:
                raise InvalidArgumentError(
                    f"Duplicate argument '{spec.name}'", name=spec.name
                )
            self._args[spec.name] = spec
            return self

        def build(self) -> "CompoundType":
            if self._key is None:
                raise InvalidArgumentError("Descriptor key not set (call with_id first)")
            return CompoundType(self._key, self._args)
