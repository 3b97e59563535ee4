"""Logging formatters for console output.

- ColoredConsoleFormatter: wraps the level name in ANSI colour codes
- HybridConsoleFormatter: bare message for INFO, coloured structure otherwise

INFO records are what a host installer shows its user ("Registered
myapp-opener.desktop"), so they stay free of timestamps and module names.
"""

import logging

from opener_registry.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI colour support per log level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with a coloured level name.

        The record's levelname is swapped only for the duration of the
        parent format() call and then restored.

        Args:
            record: The log record to format

        Returns:
            Formatted log message

        """
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter: message-only INFO, structured everything else."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter with the structured template.

        Args:
            fmt: Format string for non-INFO records
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record according to its level."""
        if record.levelno == logging.INFO:
            return record.getMessage()
        return self._colored_formatter.format(record)
