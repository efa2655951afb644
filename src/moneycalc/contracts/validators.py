"""
JSON Schema Contract Validators

A ContractValidator wraps one Draft 2020-12 schema. Two kinds of schema flow
through it:
- packaged value-type schemas (moneycalc/contracts/schema/*.json), one
  validator subclass each: rate, monetary_amount, rate_and_periods
- schemas derived from a CompoundType (see codec.compound_type_schema),
  built with ContractValidator.for_compound_type()

Validation failures surface as jsonschema.ValidationError. validate() raises
the most relevant error (jsonschema.exceptions.best_match), iter_errors()
reports all of them.
"""

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Iterator, List, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError
from jsonschema.exceptions import best_match, relevance

if TYPE_CHECKING:
    from moneycalc.core.compound import CompoundType

SCHEMA_SUFFIX = ".json"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Packaged schema files, meta-checked on first load and cached."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir else Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def names(self) -> List[str]:
        """Names of the available schemas, without suffix."""
        return sorted(p.stem for p in self._schema_dir.glob(f"*{SCHEMA_SUFFIX}"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Schema name without suffix (e.g. 'rate')

        Returns:
            Parsed schema (the cached instance, do not mutate)

        Raises:
            FileNotFoundError: if no such schema file exists
            ValueError: if the file is not a valid Draft 2020-12 schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}{SCHEMA_SUFFIX}"
        if not path.is_file():
            raise FileNotFoundError(
                f"Schema not found: {path} (available: {', '.join(self.names())})"
            )

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema

    def embeddable(self, schema_name: str) -> Dict[str, Any]:
        """Copy of a schema without $schema/$id, for nesting in another schema."""
        schema = copy.deepcopy(self.load_schema(schema_name))
        schema.pop("$schema", None)
        schema.pop("$id", None)
        return schema


_SCHEMA_LOADER = SchemaLoader()


def get_schema_loader() -> SchemaLoader:
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Validator bound to one JSON Schema.

    Subclasses for packaged schemas only set SCHEMA_NAME.
    """

    SCHEMA_NAME: ClassVar[Optional[str]] = None

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        if schema is None:
            if self.SCHEMA_NAME is None:
                raise TypeError(f"{type(self).__name__} needs a schema or SCHEMA_NAME")
            schema = _SCHEMA_LOADER.load_schema(self.SCHEMA_NAME)
        else:
            Draft202012Validator.check_schema(schema)
        self.schema = schema
        self._validator = Draft202012Validator(schema)

    @classmethod
    def for_compound_type(cls, compound_type: "CompoundType") -> "ContractValidator":
        """Validator for JSON payloads of a compound type."""
        from moneycalc.contracts.codec import compound_type_schema

        return cls(compound_type_schema(compound_type))

    @property
    def title(self) -> str:
        return self.schema.get("title", self.SCHEMA_NAME or "")

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: the most relevant violation, if any
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """All violations, most relevant first."""
        return iter(sorted(self._validator.iter_errors(data), key=relevance))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.title!r})"


class RateValidator(ContractValidator):
    SCHEMA_NAME = "rate"


class MonetaryAmountValidator(ContractValidator):
    SCHEMA_NAME = "monetary_amount"


class RateAndPeriodsValidator(ContractValidator):
    SCHEMA_NAME = "rate_and_periods"


@lru_cache(maxsize=None)
def _packaged_validator(cls: type) -> ContractValidator:
    return cls()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rate(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: if data is not a valid rate payload
    """
    _packaged_validator(RateValidator).validate(data)


def validate_monetary_amount(data: Dict[str, Any]) -> None:
    _packaged_validator(MonetaryAmountValidator).validate(data)


def validate_rate_and_periods(data: Dict[str, Any]) -> None:
    _packaged_validator(RateAndPeriodsValidator).validate(data)
