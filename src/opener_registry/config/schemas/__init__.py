"""JSON Schema validation for opener-registry records."""

from opener_registry.config.schemas.validator import (
    RecordValidator,
    SchemaValidationError,
    get_validator,
    validate_registration_record,
)

__all__ = [
    "RecordValidator",
    "SchemaValidationError",
    "get_validator",
    "validate_registration_record",
]
