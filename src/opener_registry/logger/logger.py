"""Public logging API: setup_logging, get_logger, clear_logger_state.

opener-registry is a library, so importing it never attaches output
handlers. The package root logger only carries a NullHandler until the
host application calls setup_logging().
"""

import logging
from pathlib import Path

from opener_registry.constants import ROOT_LOGGER_NAME
from opener_registry.logger.config import load_log_settings
from opener_registry.logger.handlers import attach_root_handlers
from opener_registry.logger.state import get_state

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Attach console and file handlers to the package root logger.

    Safe to call more than once; handlers are attached on the first call
    only. Missing arguments fall back to load_log_settings().

    Args:
        console_level: Console log level ("DEBUG", "INFO", "WARNING", ...)
        file_level: File log level
        log_file: Path to log file
            (default: ~/.config/opener-registry/logs/opener-registry.log)
        enable_file_logging: Whether to write the rotating log file

    Returns:
        The package root logger

    Raises:
        ConfigurationError: If file logging setup fails

    Example:
        >>> from opener_registry.logger import setup_logging
        >>> setup_logging(console_level="INFO", enable_file_logging=False)

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            attach_root_handlers(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(ROOT_LOGGER_NAME)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger in the opener_registry hierarchy.

    Use __name__ so records propagate to the package root:
        >>> logger = get_logger(__name__)

    Args:
        name: Logger name, typically __name__

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    """
    return logging.getLogger(name)


def clear_logger_state() -> None:
    """Detach and close handlers added by setup_logging().

    Intended for tests; restores the NullHandler-only root logger.
    """
    state = get_state()
    with state.lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in state.handlers:
            handler.flush()
            handler.close()
            root_logger.removeHandler(handler)

        state.handlers = []
        state.root_initialized = False
        state.config_applied = False
