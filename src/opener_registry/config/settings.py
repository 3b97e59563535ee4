"""Settings loaded from ~/.config/opener-registry/settings.conf.

The file is optional and never written by the library. Example:

    [DEFAULT]
    log_level = DEBUG
    console_log_level = WARNING

    [tools]
    xdg_mime = /usr/bin/xdg-mime
    update_desktop_database = update-desktop-database

    [registration]
    rollback_on_bind_failure = true
"""

import configparser
from dataclasses import dataclass
from pathlib import Path

from opener_registry.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_ROLLBACK_ON_BIND_FAILURE,
    DEFAULT_UPDATE_DESKTOP_DATABASE,
    DEFAULT_XDG_MIME,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_ROLLBACK_ON_BIND_FAILURE,
    KEY_UPDATE_DESKTOP_DATABASE,
    KEY_XDG_MIME,
    SECTION_DEFAULT,
    SECTION_REGISTRATION,
    SECTION_TOOLS,
    VALID_LOG_LEVELS,
)
from opener_registry.exceptions import SettingsError
from opener_registry.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """Runtime settings for registration and logging."""

    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    xdg_mime: str = DEFAULT_XDG_MIME
    update_desktop_database: str = DEFAULT_UPDATE_DESKTOP_DATABASE
    rollback_on_bind_failure: bool = DEFAULT_ROLLBACK_ON_BIND_FAILURE


def _read_level(
    config: configparser.ConfigParser, key: str, default: str
) -> str:
    value = config.get(SECTION_DEFAULT, key, fallback=default).strip().upper()
    if value not in VALID_LOG_LEVELS:
        levels = ", ".join(VALID_LOG_LEVELS)
        msg = f"{key} must be one of {levels}, got {value!r}"
        raise SettingsError(msg, target=key)
    return value


def _read_tool(
    config: configparser.ConfigParser, key: str, default: str
) -> str:
    value = config.get(SECTION_TOOLS, key, fallback=default).strip()
    if not value:
        msg = "tool command must not be empty"
        raise SettingsError(msg, target=key)
    return value


def parse_settings(config: configparser.ConfigParser) -> Settings:
    """Convert a populated parser into Settings.

    Args:
        config: Parser holding the settings file contents

    Returns:
        Settings with defaults for anything not set

    Raises:
        SettingsError: If a value is out of range

    """
    try:
        rollback = config.getboolean(
            SECTION_REGISTRATION,
            KEY_ROLLBACK_ON_BIND_FAILURE,
            fallback=DEFAULT_ROLLBACK_ON_BIND_FAILURE,
        )
    except ValueError as e:
        raise SettingsError(str(e), target=KEY_ROLLBACK_ON_BIND_FAILURE) from e

    return Settings(
        log_level=_read_level(config, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        console_log_level=_read_level(
            config, KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
        ),
        xdg_mime=_read_tool(config, KEY_XDG_MIME, DEFAULT_XDG_MIME),
        update_desktop_database=_read_tool(
            config,
            KEY_UPDATE_DESKTOP_DATABASE,
            DEFAULT_UPDATE_DESKTOP_DATABASE,
        ),
        rollback_on_bind_failure=rollback,
    )


def load_settings(settings_file: Path) -> Settings:
    """Load settings, falling back to defaults when the file is absent.

    Args:
        settings_file: Path to settings.conf

    Returns:
        Loaded settings

    Raises:
        SettingsError: If the file cannot be parsed or holds bad values

    """
    config = configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )
    if not settings_file.exists():
        logger.debug("No settings file at %s; using defaults", settings_file)
        return Settings()

    try:
        with settings_file.open(encoding="utf-8") as f:
            config.read_file(f)
    except configparser.Error as e:
        raise SettingsError(str(e), target=str(settings_file)) from e

    return parse_settings(config)
