"""Logger state shared across the opener_registry logging package.

A single module-level instance tracks whether handlers have been attached
to the package root logger, so repeated setup calls stay idempotent.
"""

import logging
import threading


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock guarding handler setup and teardown
        root_initialized: Whether handlers are attached to the root logger
        config_applied: Whether settings.conf levels have been applied
        handlers: Handlers attached by setup_logging()

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.handlers: list[logging.Handler] = []


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
