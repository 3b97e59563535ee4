"""JSON Schema validation for registration records.

Records are written by RecordStore.save() but live in the user's config
directory, so a hand-edited or truncated record is checked against
registration_record.schema.json before its state is trusted.
"""

from pathlib import Path
from typing import Any

import orjson
from jsonschema import Draft7Validator, ValidationError
from jsonschema.exceptions import best_match

from opener_registry.logger import get_logger

logger = get_logger(__name__)

SCHEMA_DIR = Path(__file__).parent
REGISTRATION_RECORD_SCHEMA_PATH = (
    SCHEMA_DIR / "registration_record.schema.json"
)


class SchemaValidationError(Exception):
    """Raised when a record does not match its schema."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize schema validation error.

        Args:
            message: Error message
            path: JSON path where the error occurred

        """
        self.path = path
        super().__init__(message)


class RecordValidator:
    """Validates registration records against the bundled schema."""

    def __init__(self) -> None:
        """Load the schema and build the validator."""
        self._validator = Draft7Validator(
            self._load_schema(REGISTRATION_RECORD_SCHEMA_PATH)
        )

    @staticmethod
    def _load_schema(schema_path: Path) -> dict[str, Any]:
        """Load a JSON schema file.

        Raises:
            FileNotFoundError: If the schema file is missing
            ValueError: If the schema is not valid JSON

        """
        try:
            schema: dict[str, Any] = orjson.loads(schema_path.read_bytes())
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in schema file {schema_path}: {e}"
            raise ValueError(msg) from e
        return schema

    @staticmethod
    def _format_validation_error(error: ValidationError) -> str:
        path = (
            ".".join(str(p) for p in error.absolute_path)
            if error.absolute_path
            else "root"
        )

        message = error.message
        if error.validator == "required":
            missing = (
                error.message.split("'")[1]
                if "'" in error.message
                else "unknown"
            )
            message = f"Missing required field: '{missing}'"
        elif error.validator == "enum":
            message = f"Invalid value. {error.message}"
        elif error.validator == "type":
            actual = type(error.instance).__name__
            expected = error.validator_value
            message = f"Expected type '{expected}', got '{actual}'"

        return f"{message} (at '{path}')"

    def validate(
        self,
        record: Any,  # noqa: ANN401
        registration_id: str,
    ) -> None:
        """Validate one decoded record.

        Args:
            record: Decoded JSON value
            registration_id: Id the record was loaded for

        Raises:
            SchemaValidationError: If validation fails

        """
        errors = list(self._validator.iter_errors(record))
        if errors:
            best_error = best_match(errors)
            path = (
                ".".join(str(p) for p in best_error.absolute_path)
                if best_error.absolute_path
                else None
            )
            raise SchemaValidationError(
                self._format_validation_error(best_error), path=path
            )

        logger.debug("Record validation passed: %s", registration_id)


_validator: RecordValidator | None = None


def get_validator() -> RecordValidator:
    """Get or create the shared validator instance."""
    global _validator  # noqa: PLW0603
    if _validator is None:
        _validator = RecordValidator()
    return _validator


def validate_registration_record(
    record: Any,  # noqa: ANN401
    registration_id: str,
) -> None:
    """Validate a registration record (convenience function).

    Raises:
        SchemaValidationError: If validation fails

    """
    get_validator().validate(record, registration_id)
