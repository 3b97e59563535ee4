"""Registration records: the file-written → bound state of each id.

Writing the entry file and binding it through xdg-mime are two separate
steps with no transaction around them. A JSON record per id tracks how far
a registration got, so status queries can tell a bound entry from one left
behind by a failed bind.
"""

import contextlib
import tempfile
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any, TypedDict

import orjson

from opener_registry.config.schemas import (
    SchemaValidationError,
    validate_registration_record,
)
from opener_registry.constants import ISO_DATETIME_FORMAT, RECORD_VERSION
from opener_registry.exceptions import RecordError
from opener_registry.logger import get_logger

logger = get_logger(__name__)


class RegistrationState(Enum):
    """Lifecycle of a registration id."""

    ABSENT = "absent"
    FILE_WRITTEN = "file-written"
    BOUND = "bound"


class RegistrationRecord(TypedDict):
    """On-disk record layout."""

    record_version: str
    id: str
    state: str
    desktop_file: str
    mimetypes: list[str]
    updated_at: str


class RecordStore:
    """Reads and writes per-id JSON records in one directory."""

    def __init__(self, records_dir: Path) -> None:
        """Create a store.

        Args:
            records_dir: Directory holding "<id>.json" records

        """
        self.records_dir = records_dir

    def _path(self, registration_id: str) -> Path:
        return self.records_dir / f"{registration_id}.json"

    def load(self, registration_id: str) -> RegistrationRecord | None:
        """Load the record for an id.

        Returns:
            The record, or None if there is none

        Raises:
            RecordError: If the record is not valid JSON or fails its schema

        """
        record_file = self._path(registration_id)
        try:
            data: Any = orjson.loads(record_file.read_bytes())
        except FileNotFoundError:
            return None
        except orjson.JSONDecodeError as e:
            raise RecordError(str(e), target=registration_id) from e

        try:
            validate_registration_record(data, registration_id)
        except SchemaValidationError as e:
            raise RecordError(str(e), target=registration_id) from e
        return data  # type: ignore[return-value]

    def save(
        self,
        registration_id: str,
        state: RegistrationState,
        desktop_file: Path,
        mimetypes: list[str],
    ) -> RegistrationRecord:
        """Write the record atomically.

        Raises:
            OSError: If the record cannot be written

        """
        record: RegistrationRecord = {
            "record_version": RECORD_VERSION,
            "id": registration_id,
            "state": state.value,
            "desktop_file": str(desktop_file),
            "mimetypes": list(mimetypes),
            "updated_at": datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT),
        }

        self.records_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=self.records_dir,
            prefix=f".{registration_id}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_file.write(
                orjson.dumps(
                    record,
                    option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS,
                )
            )
            tmp_file.flush()
            temp_path = Path(tmp_file.name)

        try:
            temp_path.replace(self._path(registration_id))
        except OSError:
            with contextlib.suppress(OSError):
                temp_path.unlink()
            raise

        logger.debug("Recorded %s as %s", registration_id, state.value)
        return record

    def remove(self, registration_id: str) -> bool:
        """Delete the record for an id.

        Returns:
            True if a record was removed, False if none existed

        """
        try:
            self._path(registration_id).unlink()
        except FileNotFoundError:
            return False
        return True
