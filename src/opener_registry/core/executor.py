"""Command execution seam for the external desktop database tools.

Registration talks to xdg-mime and update-desktop-database only through a
CommandExecutor, so tests can record invocations instead of touching the
real desktop database.
"""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from opener_registry.exceptions import ExternalToolError
from opener_registry.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


class CommandExecutor(Protocol):
    """Runs an external tool and reports its exit status."""

    def run(self, name: str, args: Sequence[str]) -> CommandResult:
        """Run ``name`` with ``args`` to completion.

        Raises:
            ExternalToolError: If the tool cannot be launched

        """
        ...


class SubprocessExecutor:
    """CommandExecutor backed by subprocess.run."""

    def run(self, name: str, args: Sequence[str]) -> CommandResult:
        """Run the tool, capturing its text output.

        Args:
            name: Executable name or path
            args: Arguments after the executable

        Returns:
            CommandResult with the exit status and captured output

        Raises:
            ExternalToolError: If the executable is missing or not runnable

        """
        command = [name, *args]
        logger.debug("Running %s", command)
        try:
            completed = subprocess.run(  # noqa: S603
                command,
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            msg = f"could not launch {name}: {e}"
            raise ExternalToolError(msg, tool=name, args=args) from e

        logger.debug("%s exited with status %d", name, completed.returncode)
        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
