"""Cleanup of the per-user default-associations list (mimeapps.list).

xdg-mime records one "<mimetype>=<entry filename>" line per bound type
under "[Default Applications]". After an entry is removed every such line
must go, or the desktop keeps dangling default-handler references.

configparser only checks that the file is well formed. The rewrite works
on the original lines, so comments, blank lines, duplicate sections and
duplicate keys survive; only the matching "[Default Applications]" lines
are dropped.
"""

import configparser
from pathlib import Path

from opener_registry.constants import (
    DEFAULT_APPLICATIONS_SECTION,
    DESKTOP_LIST_SEPARATOR,
)
from opener_registry.exceptions import DefaultAppsListError
from opener_registry.logger import get_logger

logger = get_logger(__name__)

COMMENT_PREFIXES = ("#",)


def _section_name(stripped: str) -> str | None:
    if stripped.startswith("[") and stripped.endswith("]"):
        return stripped[1:-1].strip()
    return None


def _split_entry(stripped: str) -> tuple[str, str] | None:
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return None
    if "=" not in stripped:
        return None
    key, value = stripped.split("=", 1)
    return key.strip(), value.strip()


class DefaultAppsList:
    """mimeapps.list lines that can drop references to one entry."""

    def __init__(self, path: Path, lines: list[str]) -> None:
        self.path = path
        self.lines = lines

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            delimiters=("=",),
            comment_prefixes=COMMENT_PREFIXES,
            inline_comment_prefixes=None,
            default_section="__opener_registry_unused__",
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        return parser

    @classmethod
    def load(cls, path: Path) -> "DefaultAppsList | None":
        """Load the list, or return None when the file does not exist.

        Raises:
            DefaultAppsListError: If the file exists but cannot be parsed
            OSError: If the file cannot be read

        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise DefaultAppsListError(str(e), target=str(path)) from e

        try:
            cls._new_parser().read_string(text, source=str(path))
        except configparser.Error as e:
            raise DefaultAppsListError(str(e), target=str(path)) from e
        return cls(path, text.splitlines(keepends=True))

    def _matching_lines(self, filename: str) -> list[tuple[int, str]]:
        """Return (line index, MIME type) for lines naming ``filename``."""
        matches: list[tuple[int, str]] = []
        section: str | None = None
        for index, line in enumerate(self.lines):
            stripped = line.strip()
            header = _section_name(stripped)
            if header is not None:
                section = header
                continue
            if section != DEFAULT_APPLICATIONS_SECTION:
                continue
            entry = _split_entry(stripped)
            if entry is None:
                continue
            mimetype, value = entry
            if value.rstrip(DESKTOP_LIST_SEPARATOR) == filename:
                matches.append((index, mimetype))
        return matches

    @property
    def has_default_section(self) -> bool:
        return any(
            _section_name(line.strip()) == DEFAULT_APPLICATIONS_SECTION
            for line in self.lines
        )

    def keys_referencing(self, filename: str) -> list[str]:
        """Return MIME types whose default handler is ``filename``."""
        keys: list[str] = []
        for _, mimetype in self._matching_lines(filename):
            if mimetype not in keys:
                keys.append(mimetype)
        return keys

    def remove_references(self, filename: str) -> list[str]:
        """Drop every default mapping line that points at ``filename``.

        Returns:
            The removed MIME type keys

        """
        removed = self.keys_referencing(filename)
        drop = {index for index, _ in self._matching_lines(filename)}
        self.lines = [
            line for index, line in enumerate(self.lines) if index not in drop
        ]
        return removed

    def save(self) -> None:
        """Rewrite the file in place.

        Raises:
            OSError: If the file cannot be written

        """
        with self.path.open("w", encoding="utf-8") as f:
            f.writelines(self.lines)


def purge_default_references(mimeapps_list: Path, filename: str) -> list[str]:
    """Remove every default-association line pointing at ``filename``.

    A missing file or a file without "[Default Applications]" is a
    successful no-op. The file is rewritten only when something changed.

    Args:
        mimeapps_list: Path to mimeapps.list
        filename: Entry filename, e.g. "app1-opener.desktop"

    Returns:
        Removed MIME type keys

    Raises:
        DefaultAppsListError: If the file cannot be parsed
        OSError: If the file cannot be read or rewritten

    """
    default_apps = DefaultAppsList.load(mimeapps_list)
    if default_apps is None:
        logger.debug("No default-associations list at %s", mimeapps_list)
        return []
    if not default_apps.has_default_section:
        logger.debug(
            "%s has no [%s] section",
            mimeapps_list,
            DEFAULT_APPLICATIONS_SECTION,
        )
        return []

    removed = default_apps.remove_references(filename)
    if removed:
        default_apps.save()
        logger.debug(
            "Removed %d default association(s) for %s from %s",
            len(removed),
            filename,
            mimeapps_list,
        )
    return removed
