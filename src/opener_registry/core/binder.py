"""System binder: default-handler associations and database refresh."""

from collections.abc import Sequence
from pathlib import Path

from opener_registry.constants import (
    DEFAULT_UPDATE_DESKTOP_DATABASE,
    DEFAULT_XDG_MIME,
    XDG_MIME_DEFAULT_SUBCOMMAND,
)
from opener_registry.core.executor import CommandExecutor, CommandResult
from opener_registry.exceptions import ExternalToolError
from opener_registry.logger import get_logger

logger = get_logger(__name__)


class SystemBinder:
    """Invokes xdg-mime and update-desktop-database through an executor."""

    def __init__(
        self,
        executor: CommandExecutor,
        xdg_mime: str = DEFAULT_XDG_MIME,
        update_desktop_database: str = DEFAULT_UPDATE_DESKTOP_DATABASE,
    ) -> None:
        """Create a binder.

        Args:
            executor: Runs the external tools
            xdg_mime: xdg-mime executable
            update_desktop_database: update-desktop-database executable

        """
        self.executor = executor
        self.xdg_mime = xdg_mime
        self.update_desktop_database = update_desktop_database

    def _run_checked(self, tool: str, args: list[str]) -> CommandResult:
        result = self.executor.run(tool, args)
        if result.returncode != 0:
            stderr = result.stderr.strip()
            msg = f"exited with status {result.returncode}"
            if stderr:
                msg = f"{msg}: {stderr}"
            raise ExternalToolError(
                msg,
                tool=tool,
                args=args,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

    def set_default_handler(
        self, filename: str, mimetypes: Sequence[str]
    ) -> None:
        """Make ``filename`` the default application for every MIME type.

        Runs ``xdg-mime default <filename> <mimetype...>``.

        Raises:
            ExternalToolError: If xdg-mime cannot run or exits non-zero

        """
        args = [XDG_MIME_DEFAULT_SUBCOMMAND, filename, *mimetypes]
        self._run_checked(self.xdg_mime, args)
        logger.debug("Set %s as default for %s", filename, list(mimetypes))

    def refresh_database(self, applications_dir: Path) -> None:
        """Rebuild the MIME cache for the application registry.

        Raises:
            ExternalToolError: If update-desktop-database fails

        """
        self._run_checked(
            self.update_desktop_database, [str(applications_dir)]
        )
        logger.debug("Desktop database refreshed for %s", applications_dir)
