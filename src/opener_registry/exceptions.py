"""Exception classes for opener-registry operations."""

from collections.abc import Sequence


class OpenerRegistryError(Exception):
    """Base exception for opener-registry operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional registration id or path that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ValidationError(OpenerRegistryError):
    """Raised when registration options are rejected."""

    error_prefix = "Validation failed"


class EnvironmentConfigError(OpenerRegistryError):
    """Raised when the process environment lacks a required value."""

    error_prefix = "Environment misconfigured"


class SettingsError(OpenerRegistryError):
    """Raised when settings.conf holds an unusable value."""

    error_prefix = "Invalid settings"


class DefaultAppsListError(OpenerRegistryError):
    """Raised when mimeapps.list exists but cannot be parsed."""

    error_prefix = "Unreadable default-associations list"


class RecordError(OpenerRegistryError):
    """Raised when a registration record cannot be read."""

    error_prefix = "Invalid registration record"


class ExternalToolError(OpenerRegistryError):
    """Raised when an external tool cannot run or exits non-zero."""

    error_prefix = "External tool failed"

    def __init__(
        self,
        message: str,
        tool: str,
        args: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        """Initialize error with the failing command details.

        Args:
            message: Error message describing the failure.
            tool: Name of the executable that was invoked.
            args: Arguments passed to the executable.
            returncode: Exit status, or None if the tool never started.
            stderr: Captured standard error output.

        """
        super().__init__(message, target=tool)
        self.tool = tool
        self.tool_args = tuple(args)
        self.returncode = returncode
        self.stderr = stderr
