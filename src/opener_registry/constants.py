"""Centralized constants module for opener-registry.

Constants are grouped by concern and annotated with typing.Final so the
rest of the package treats them as read-only.

Usage:
    from opener_registry.constants import DESKTOP_ENTRY_SECTION
"""

from typing import Final

# =============================================================================
# Filesystem Layout
# =============================================================================

# Environment variable holding the user's home directory
HOME_ENV_VAR: Final[str] = "HOME"

# Per-user application registry, relative to the home directory
USER_APPLICATIONS_SUBPATH: Final[tuple[str, ...]] = (
    ".local",
    "share",
    "applications",
)

# Directory mode for the registry (owner-only, like other XDG data dirs)
USER_APPLICATIONS_DIR_MODE: Final[int] = 0o700

# Entry file mode once written
DESKTOP_FILE_MODE: Final[int] = 0o644

# Default-associations list, relative to the home directory
MIMEAPPS_LIST_SUBPATH: Final[tuple[str, ...]] = (".config", "mimeapps.list")

# opener-registry's own config directory under ~/.config
CONFIG_SUBDIR: Final[str] = "opener-registry"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
RECORDS_DIR_NAME: Final[str] = "registrations"
LOGS_DIR_NAME: Final[str] = "logs"
LOG_FILE_NAME: Final[str] = "opener-registry.log"

# Suffix appended to the registration id to form the entry filename
DESKTOP_FILENAME_SUFFIX: Final[str] = "-opener.desktop"

# =============================================================================
# Desktop Entry Format
# =============================================================================

DESKTOP_ENTRY_SECTION: Final[str] = "Desktop Entry"
DESKTOP_ACTION_SECTION_PREFIX: Final[str] = "Desktop Action "
DESKTOP_ENTRY_TYPE: Final[str] = "Application"
DESKTOP_LIST_SEPARATOR: Final[str] = ";"

# Synthesized MIME type for a URL scheme
SCHEME_HANDLER_MIME_PREFIX: Final[str] = "x-scheme-handler/"

# Tokens the Exec key uses for the invoked URL
URL_PLACEHOLDERS: Final[tuple[str, ...]] = ("%u", "%U")

# Stock secondary action ids
ACTION_QUICK_PREVIEW: Final[str] = "QuickPreview"
ACTION_OPEN_WITH_TERMINAL: Final[str] = "OpenWithTerminal"

# Action ids appear in "Actions=" and in section headers
ACTION_ID_PATTERN: Final[str] = r"^[A-Za-z0-9-]+$"

# Section of mimeapps.list holding the default handler per MIME type
DEFAULT_APPLICATIONS_SECTION: Final[str] = "Default Applications"

# =============================================================================
# External Tools
# =============================================================================

DEFAULT_XDG_MIME: Final[str] = "xdg-mime"
DEFAULT_UPDATE_DESKTOP_DATABASE: Final[str] = "update-desktop-database"
XDG_MIME_DEFAULT_SUBCOMMAND: Final[str] = "default"

# =============================================================================
# Settings File
# =============================================================================

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_TOOLS: Final[str] = "tools"
SECTION_REGISTRATION: Final[str] = "registration"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_XDG_MIME: Final[str] = "xdg_mime"
KEY_UPDATE_DESKTOP_DATABASE: Final[str] = "update_desktop_database"
KEY_ROLLBACK_ON_BIND_FAILURE: Final[str] = "rollback_on_bind_failure"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_ROLLBACK_ON_BIND_FAILURE: Final[bool] = False

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Registration Records
# =============================================================================

RECORD_VERSION: Final[str] = "1.0.0"
ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S%z"

# =============================================================================
# Logging Constants
# =============================================================================

ROOT_LOGGER_NAME: Final[str] = "opener_registry"

# Environment override for the log directory (used by the test suite)
LOG_DIR_ENV_VAR: Final[str] = "OPENER_REGISTRY_LOG_DIR"

LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
