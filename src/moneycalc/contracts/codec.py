"""
Compound Value JSON Codec

Wire format for compound values: a JSON object keyed by argument name.

    {"rate": {"value": "0.05"}, "periods": 10,
     "amount": {"number": "1000.00", "currency": "EUR"}}

A JSON Schema is derived from the CompoundType (required arguments listed,
no additional properties), the payload is validated with jsonschema, then
each argument is decoded by the codec registered for its declared type.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from decimal import Decimal
from typing import Any, Callable, Dict

from moneycalc.contracts.validators import ContractValidator, get_schema_loader
from moneycalc.core.compound import CompoundType, CompoundValue, InvalidArgumentError
from moneycalc.core.domain import MonetaryAmount, Rate, RateAndPeriods
from moneycalc.core.math.decimal_ops import to_decimal

logger = logging.getLogger(__name__)

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

_DECIMAL_SCHEMA: Dict[str, Any] = {
    "oneOf": [
        {"type": "number"},
        {"type": "string", "pattern": "^-?[0-9]+(\\.[0-9]+)?([eE][-+]?[0-9]+)?$"},
    ]
}


# =============================================================================
# ARGUMENT CODECS
# =============================================================================


@dataclass(frozen=True)
class ArgCodec:
    """JSON schema fragment, decoder and encoder for one argument type."""

    schema: Callable[[], Dict[str, Any]]
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]


def _decode_int(value: Any) -> int:
    # jsonschema treats 3.0 as an integer
    if isinstance(value, float):
        return int(value)
    return value


def _model_codec(schema_name: str, model: type) -> ArgCodec:
    return ArgCodec(
        schema=lambda: get_schema_loader().embeddable(schema_name),
        decode=model.model_validate,
        encode=lambda v: v.model_dump(mode="json"),
    )


_ARG_CODECS: Dict[type, ArgCodec] = {
    Rate: _model_codec("rate", Rate),
    MonetaryAmount: _model_codec("monetary_amount", MonetaryAmount),
    RateAndPeriods: _model_codec("rate_and_periods", RateAndPeriods),
    int: ArgCodec(schema=lambda: {"type": "integer"}, decode=_decode_int, encode=lambda v: v),
    Decimal: ArgCodec(schema=lambda: dict(_DECIMAL_SCHEMA), decode=to_decimal, encode=str),
    str: ArgCodec(schema=lambda: {"type": "string"}, decode=str, encode=str),
    bool: ArgCodec(schema=lambda: {"type": "boolean"}, decode=bool, encode=bool),
}


def register_arg_codec(arg_type: type, codec: ArgCodec) -> None:
    """Register (or replace) the codec for an argument type."""
    _ARG_CODECS[arg_type] = codec
    compound_value_validator.cache_clear()


def get_arg_codec(arg_type: type, name: str = "") -> ArgCodec:
    """
    Raises:
        InvalidArgumentError: if no codec is registered for arg_type
    """
    codec = _ARG_CODECS.get(arg_type)
    if codec is None:
        raise InvalidArgumentError(
            f"No JSON codec registered for argument '{name}' of type {arg_type.__name__}",
            name=name or None,
            expected=arg_type,
        )
    return codec


# =============================================================================
# SCHEMA / PARSE / DUMP
# =============================================================================


def compound_type_schema(compound_type: CompoundType) -> Dict[str, Any]:
    """
    JSON Schema for payloads of a compound type.

    Args:
        compound_type: Descriptor

    Returns:
        Draft 2020-12 schema (dict)
    """
    properties = {
        name: get_arg_codec(spec.type, name).schema()
        for name, spec in compound_type.args.items()
    }
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "title": compound_type.key,
        "type": "object",
        "properties": properties,
        "required": sorted(compound_type.required_args),
        "additionalProperties": False,
    }


@lru_cache(maxsize=256)
def compound_value_validator(compound_type: CompoundType) -> ContractValidator:
    """Cached validator for payloads of compound_type."""
    return ContractValidator.for_compound_type(compound_type)


def parse_compound_value(compound_type: CompoundType, payload: Dict[str, Any]) -> CompoundValue:
    """
    Decode a JSON payload into a CompoundValue.

    Args:
        compound_type: Descriptor the payload must satisfy
        payload: Parsed JSON object

    Returns:
        CompoundValue built against compound_type

    Raises:
        ValidationError: if payload does not match compound_type_schema()
        InvalidArgumentError: if the decoded values fail CompoundValue checks
    """
    compound_value_validator(compound_type).validate(payload)

    builder = CompoundValue.builder(compound_type)
    for name, raw in payload.items():
        codec = get_arg_codec(compound_type.arg_type(name), name)
        builder.set(name, codec.decode(raw))

    logger.debug("Parsed compound value for %s", compound_type.key)
    return builder.build()


def dump_compound_value(value: CompoundValue) -> Dict[str, Any]:
    """
    Encode a CompoundValue as a JSON-ready dict (Decimals as strings).
    """
    compound_type = value.compound_type
    return {
        name: get_arg_codec(compound_type.arg_type(name), name).encode(arg)
        for name, arg in value.as_dict().items()
    }
