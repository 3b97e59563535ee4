"""Handler creation for the opener_registry logging package.

- Console handler with hybrid formatting
- Rotating file handler, rolled over on setup when already oversized
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from opener_registry.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
    ROOT_LOGGER_NAME,
)
from opener_registry.exceptions import OpenerRegistryError
from opener_registry.logger.formatters import HybridConsoleFormatter
from opener_registry.logger.state import _LoggerState


class ConfigurationError(OpenerRegistryError):
    """Error in logging configuration."""

    error_prefix = "Logging setup failed"


def _level(name: str, fallback: int) -> int:
    value = getattr(logging, name.upper(), None)
    return value if isinstance(value, int) else fallback


def create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create the console handler.

    Args:
        console_level: Level name, e.g. "WARNING"

    Returns:
        StreamHandler writing to stderr

    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    handler.setLevel(_level(console_level, logging.WARNING))
    return handler


def create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create the rotating file handler.

    Args:
        log_file: Path to the log file
        file_level: Level name, e.g. "INFO"

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the log directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
        )
        handler.setLevel(_level(file_level, logging.INFO))

        if (
            log_file.exists()
            and log_file.stat().st_size >= LOG_ROTATION_THRESHOLD_BYTES
        ):
            handler.doRollover()
    except OSError as e:
        msg = f"cannot open log file: {e}"
        raise ConfigurationError(msg, target=str(log_file)) from e
    else:
        return handler


def attach_root_handlers(
    state: _LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Attach handlers to the package root logger.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level
        file_level: File log level
        log_file: Path to the log file
        enable_file_logging: Whether to add the file handler

    Raises:
        ConfigurationError: If the file handler cannot be created

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # filter at handlers

    handlers: list[logging.Handler] = [create_console_handler(console_level)]
    if enable_file_logging:
        handlers.append(create_file_handler(log_file, file_level))

    for handler in handlers:
        root_logger.addHandler(handler)

    state.handlers = handlers
    state.root_initialized = True
