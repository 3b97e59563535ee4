"""opener-registry: register desktop applications as URL protocol handlers.

Example:
    >>> from opener_registry import (
    ...     EntryMetadata, RegistrationOptions, register, unregister
    ... )
    >>> register(
    ...     "myapp",
    ...     RegistrationOptions(
    ...         exec="myapp --open %u",
    ...         protocols=("myapp",),
    ...         metadata=EntryMetadata(name="My App"),
    ...     ),
    ... )
    >>> unregister("myapp")

The module-level functions read HOME from the process environment. Build a
ProtocolRegistrar directly to inject paths, settings or a command executor.
"""

from pathlib import Path

from opener_registry.core import (
    EntryMetadata,
    ProtocolRegistrar,
    RegistrationOptions,
    RegistrationState,
    SecondaryAction,
)
from opener_registry.exceptions import (
    DefaultAppsListError,
    EnvironmentConfigError,
    ExternalToolError,
    OpenerRegistryError,
    RecordError,
    SettingsError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "DefaultAppsListError",
    "EntryMetadata",
    "EnvironmentConfigError",
    "ExternalToolError",
    "OpenerRegistryError",
    "ProtocolRegistrar",
    "RecordError",
    "RegistrationOptions",
    "RegistrationState",
    "SecondaryAction",
    "SettingsError",
    "ValidationError",
    "purge_default_associations",
    "register",
    "registration_status",
    "unregister",
]


def register(registration_id: str, options: RegistrationOptions) -> Path:
    """Register ``options`` as the handler entry ``<id>-opener.desktop``."""
    registrar = ProtocolRegistrar.create_default()
    return registrar.register(registration_id, options)


def unregister(registration_id: str) -> list[str]:
    """Remove the handler entry for ``registration_id``."""
    return ProtocolRegistrar.create_default().unregister(registration_id)


def registration_status(registration_id: str) -> RegistrationState:
    """Report ABSENT, FILE_WRITTEN or BOUND for ``registration_id``."""
    return ProtocolRegistrar.create_default().status(registration_id)


def purge_default_associations(registration_id: str) -> list[str]:
    """Drop stale default mappings for ``registration_id``."""
    return ProtocolRegistrar.create_default().purge_default_associations(
        registration_id
    )
