"""ProtocolRegistrar: registers and unregisters URL protocol handlers.

Registration moves an id from absent to registered:

    validate → write entry (file-written) → xdg-mime default
             → refresh (bound)

Unregistration moves it back: delete the entry file, then purge every
default-association line that still names it. Errors propagate as soon
as a step fails. Earlier steps are not undone unless the
rollback_on_bind_failure setting is enabled, in which case a failed bind
or refresh deletes the entry file.
"""

from collections.abc import Mapping
from pathlib import Path

from opener_registry.config.paths import XdgPaths, desktop_filename
from opener_registry.config.settings import Settings, load_settings
from opener_registry.core.binder import SystemBinder
from opener_registry.core.default_apps import purge_default_references
from opener_registry.core.desktop_entry import write_desktop_entry
from opener_registry.core.executor import CommandExecutor, SubprocessExecutor
from opener_registry.core.options import (
    RegistrationOptions,
    validate_registration,
    validate_registration_id,
)
from opener_registry.core.records import RecordStore, RegistrationState
from opener_registry.exceptions import ExternalToolError
from opener_registry.logger import get_logger, update_logger_from_settings

logger = get_logger(__name__)


class ProtocolRegistrar:
    """Service owning the register/unregister lifecycle of handler entries."""

    def __init__(
        self,
        paths: XdgPaths,
        binder: SystemBinder,
        records: RecordStore | None = None,
        rollback_on_bind_failure: bool = False,  # noqa: FBT001, FBT002
    ) -> None:
        """Create a registrar.

        Args:
            paths: Per-user path layout (carries the home directory)
            binder: Runs xdg-mime and update-desktop-database
            records: Registration record store
                (defaults to one under paths.records_dir)
            rollback_on_bind_failure: Delete the entry file again when
                binding or refreshing fails

        """
        self.paths = paths
        self.binder = binder
        self.records = records or RecordStore(paths.records_dir)
        self.rollback_on_bind_failure = rollback_on_bind_failure

    @classmethod
    def create_default(
        cls,
        environ: Mapping[str, str] | None = None,
        executor: CommandExecutor | None = None,
        settings: Settings | None = None,
    ) -> "ProtocolRegistrar":
        """Create a registrar from the environment and settings.conf.

        Args:
            environ: Environment mapping (defaults to os.environ)
            executor: Command executor (defaults to SubprocessExecutor)
            settings: Settings (defaults to settings.conf under $HOME)

        Returns:
            Configured ProtocolRegistrar

        Raises:
            EnvironmentConfigError: If HOME is not set
            SettingsError: If settings.conf is invalid

        """
        paths = XdgPaths.from_environ(environ)
        if settings is None:
            settings = load_settings(paths.settings_file)
            update_logger_from_settings(settings)

        binder = SystemBinder(
            executor or SubprocessExecutor(),
            xdg_mime=settings.xdg_mime,
            update_desktop_database=settings.update_desktop_database,
        )
        return cls(
            paths,
            binder,
            rollback_on_bind_failure=settings.rollback_on_bind_failure,
        )

    def register(
        self, registration_id: str, options: RegistrationOptions
    ) -> Path:
        """Install and bind the handler entry for ``registration_id``.

        Registering the same id again overwrites the entry file and runs
        the binder again.

        Args:
            registration_id: Unique registration identifier
            options: What to register

        Returns:
            Path of the entry file

        Raises:
            ValidationError: If the options are rejected (nothing written)
            ExternalToolError: If xdg-mime or update-desktop-database fail
            OSError: On filesystem failures

        """
        validate_registration(registration_id, options)

        desktop_file = write_desktop_entry(
            self.paths, registration_id, options
        )
        mimetypes = options.all_mimetypes()
        self.records.save(
            registration_id,
            RegistrationState.FILE_WRITTEN,
            desktop_file,
            mimetypes,
        )

        try:
            self.binder.set_default_handler(desktop_file.name, mimetypes)
            self.binder.refresh_database(self.paths.applications_dir)
        except ExternalToolError:
            if self.rollback_on_bind_failure:
                self._rollback(registration_id, desktop_file)
            raise

        self.records.save(
            registration_id, RegistrationState.BOUND, desktop_file, mimetypes
        )
        logger.info(
            "Registered %s for %s", desktop_file.name, ", ".join(mimetypes)
        )
        return desktop_file

    def _rollback(self, registration_id: str, desktop_file: Path) -> None:
        logger.warning(
            "Binding %s failed; removing %s", registration_id, desktop_file
        )
        desktop_file.unlink(missing_ok=True)
        self.records.remove(registration_id)

    def unregister(self, registration_id: str) -> list[str]:
        """Remove the entry for ``registration_id`` and its default mappings.

        Args:
            registration_id: Identifier used at registration time

        Returns:
            MIME types whose default-association line was removed

        Raises:
            FileNotFoundError: If no entry file exists for the id; the
                default-associations list is left untouched
            DefaultAppsListError: If mimeapps.list cannot be parsed
            OSError: If mimeapps.list cannot be rewritten

        """
        validate_registration_id(registration_id)

        self.paths.desktop_file(registration_id).unlink()

        removed = purge_default_references(
            self.paths.mimeapps_list, desktop_filename(registration_id)
        )
        self.records.remove(registration_id)
        logger.info("Unregistered %s", desktop_filename(registration_id))
        return removed

    def purge_default_associations(self, registration_id: str) -> list[str]:
        """Remove default mappings for ``registration_id`` without its file.

        Recovers from the state unregister() cannot handle: the entry file
        is already gone but mimeapps.list still points at it.

        Returns:
            MIME types whose default-association line was removed

        Raises:
            DefaultAppsListError: If mimeapps.list cannot be parsed
            OSError: If mimeapps.list cannot be rewritten

        """
        validate_registration_id(registration_id)

        removed = purge_default_references(
            self.paths.mimeapps_list, desktop_filename(registration_id)
        )
        if not self.paths.desktop_file(registration_id).exists():
            self.records.remove(registration_id)
        return removed

    def status(self, registration_id: str) -> RegistrationState:
        """Report how far the registration of ``registration_id`` got.

        An entry file without a record counts as FILE_WRITTEN; a record
        without an entry file counts as ABSENT.

        Raises:
            RecordError: If the record exists but is unreadable

        """
        validate_registration_id(registration_id)

        if not self.paths.desktop_file(registration_id).exists():
            return RegistrationState.ABSENT

        record = self.records.load(registration_id)
        bound = RegistrationState.BOUND.value
        if record is not None and record["state"] == bound:
            return RegistrationState.BOUND
        return RegistrationState.FILE_WRITTEN
