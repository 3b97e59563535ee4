"""Logging utilities for opener-registry.

Usage:
    In any module:
        >>> from opener_registry.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Running %s %s", tool, args)  # %-style formatting

    In a host application that wants the library's output:
        >>> from opener_registry.logger import setup_logging
        >>> setup_logging(console_level="INFO")

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from typing import TYPE_CHECKING

from opener_registry.logger.config import (
    update_logger_from_settings as _update_from_settings,
)
from opener_registry.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from opener_registry.logger.handlers import ConfigurationError
from opener_registry.logger.logger import (
    clear_logger_state,
    get_logger,
    setup_logging,
)
from opener_registry.logger.state import get_state

if TYPE_CHECKING:
    from opener_registry.config.settings import Settings

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "get_logger",
    "setup_logging",
    "update_logger_from_settings",
]


def update_logger_from_settings(settings: "Settings") -> None:
    """Apply settings.conf log levels to the attached handlers.

    Example:
        >>> from opener_registry.config import load_settings
        >>> update_logger_from_settings(load_settings(paths.settings_file))

    """
    _update_from_settings(get_state(), settings)
