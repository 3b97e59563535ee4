"""Default log settings and runtime level updates.

Environment Variable Override:
    OPENER_REGISTRY_LOG_DIR: Directory for opener-registry.log. The test
    suite points it at a temporary directory so runs never touch the
    user's real log file.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from opener_registry.constants import (
    CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
    LOGS_DIR_NAME,
)

if TYPE_CHECKING:
    from opener_registry.config.settings import Settings
    from opener_registry.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Return the bootstrap console level, file level and log path.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_dir = Path(env_log_dir).expanduser()
    else:
        log_dir = Path.home() / ".config" / CONFIG_SUBDIR / LOGS_DIR_NAME

    log_path = log_dir / LOG_FILE_NAME
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_settings(
    state: "_LoggerState", settings: "Settings"
) -> None:
    """Apply settings.conf log levels to already attached handlers.

    Only handler levels change; handlers are never added or removed here.

    Args:
        state: Logger state object (from logger.state module)
        settings: Loaded settings

    """
    console_level = getattr(logging, settings.console_log_level)
    file_level = getattr(logging, settings.log_level)

    for handler in state.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(file_level)
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console_level)

    state.config_applied = True
