"""
Contract Validation Module

JSON Schema contracts for the value types and the JSON wire format of
compound values.
"""

from .codec import (
    ArgCodec,
    compound_type_schema,
    compound_value_validator,
    dump_compound_value,
    get_arg_codec,
    parse_compound_value,
    register_arg_codec,
)
from .validators import (
    ContractValidator,
    MonetaryAmountValidator,
    RateAndPeriodsValidator,
    RateValidator,
    SchemaLoader,
    get_schema_loader,
    validate_monetary_amount,
    validate_rate,
    validate_rate_and_periods,
)

__all__ = [
    # Classes
    "ArgCodec",
    "SchemaLoader",
    "ContractValidator",
    "RateValidator",
    "MonetaryAmountValidator",
    "RateAndPeriodsValidator",
    # Functions
    "compound_type_schema",
    "compound_value_validator",
    "dump_compound_value",
    "get_arg_codec",
    "get_schema_loader",
    "parse_compound_value",
    "register_arg_codec",
    "validate_rate",
    "validate_monetary_amount",
    "validate_rate_and_periods",
]
