"""
Compound Errors — Error kinds raised by the typed-argument core

All errors are raised at the point of detection and propagate to the caller.
Each class subclasses the closest builtin so callers may catch either.
"""

from typing import Any, Optional


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__name__
    return repr(tp)


class InvalidArgumentError(ValueError):
    """
    Invalid named argument while building a descriptor or a compound value.

    Attributes:
        name: Offending argument name (None when not name-specific)
        expected: Declared type (None when not type-specific)
        actual: Supplied runtime type (None when not type-specific)
    """

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        expected: Optional[type] = None,
        actual: Optional[type] = None,
    ):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class InvalidInputTypeError(ValueError):
    """
    Compound function received a value built against another descriptor.

    Attributes:
        expected: Descriptor the function requires
        actual: Descriptor the value was built against
    """

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid input type, required: {expected!r}, but was {actual!r}")


class MissingArgumentError(KeyError):
    """Requested argument is not present in the compound value."""

    def __init__(self, name: str, compound_type: Any = None):
        self.name = name
        self.compound_type = compound_type
        super().__init__(name)

    def __str__(self) -> str:
        return f"Missing argument '{self.name}' in {self.compound_type!r}"


class TypeMismatchError(TypeError):
    """Stored argument value is not an instance of the requested type."""

    def __init__(self, name: str, expected: type, actual: type):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Argument '{name}' is {_type_name(actual)}, "
            f"not compatible with requested {_type_name(expected)}"
        )


class InvalidConstructionParameterError(ValueError):
    """Formula constructed with a missing or out-of-range fixed parameter."""

    def __init__(self, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} {reason}: {value!r}")


class CurrencyMismatchError(ValueError):
    """Arithmetic or comparison across different currencies."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Currency mismatch: {expected} != {actual}")
