"""Path layout for opener-registry, derived from an injected home directory.

Nothing here reads the process environment implicitly: callers build an
XdgPaths from an explicit home directory, or from an environ mapping via
XdgPaths.from_environ().
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from opener_registry.constants import (
    CONFIG_FILE_NAME,
    CONFIG_SUBDIR,
    DESKTOP_FILENAME_SUFFIX,
    HOME_ENV_VAR,
    MIMEAPPS_LIST_SUBPATH,
    RECORDS_DIR_NAME,
    USER_APPLICATIONS_SUBPATH,
)
from opener_registry.exceptions import EnvironmentConfigError


def desktop_filename(registration_id: str) -> str:
    """Return the entry filename for a registration id.

    Args:
        registration_id: Unique registration identifier

    Returns:
        "<id>-opener.desktop"

    """
    return f"{registration_id}{DESKTOP_FILENAME_SUFFIX}"


@dataclass(frozen=True)
class XdgPaths:
    """Per-user locations used by registration and unregistration."""

    home: Path

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None
    ) -> "XdgPaths":
        """Build paths from the HOME variable.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            XdgPaths rooted at $HOME

        Raises:
            EnvironmentConfigError: If HOME is unset or empty

        """
        env = os.environ if environ is None else environ
        home = env.get(HOME_ENV_VAR)
        if not home:
            msg = f"environment variable not set: ${HOME_ENV_VAR}"
            raise EnvironmentConfigError(msg)
        return cls(home=Path(home))

    @property
    def applications_dir(self) -> Path:
        """~/.local/share/applications"""
        return self.home.joinpath(*USER_APPLICATIONS_SUBPATH)

    @property
    def mimeapps_list(self) -> Path:
        """~/.config/mimeapps.list"""
        return self.home.joinpath(*MIMEAPPS_LIST_SUBPATH)

    @property
    def config_dir(self) -> Path:
        return self.home / ".config" / CONFIG_SUBDIR

    @property
    def settings_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    @property
    def records_dir(self) -> Path:
        return self.config_dir / RECORDS_DIR_NAME

    def desktop_file(self, registration_id: str) -> Path:
        """Return the absolute entry file path for a registration id."""
        return self.applications_dir / desktop_filename(registration_id)
