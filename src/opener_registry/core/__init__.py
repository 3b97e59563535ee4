"""Core registration logic: options, entry files, binding and cleanup."""

from opener_registry.core.binder import SystemBinder
from opener_registry.core.default_apps import (
    DefaultAppsList,
    purge_default_references,
)
from opener_registry.core.desktop_entry import (
    build_entry_document,
    render_entry_document,
    write_desktop_entry,
)
from opener_registry.core.executor import (
    CommandExecutor,
    CommandResult,
    SubprocessExecutor,
)
from opener_registry.core.options import (
    EntryMetadata,
    RegistrationOptions,
    SecondaryAction,
    validate_registration,
    validate_registration_id,
)
from opener_registry.core.records import RecordStore, RegistrationState
from opener_registry.core.registrar import ProtocolRegistrar

__all__ = [
    "CommandExecutor",
    "CommandResult",
    "DefaultAppsList",
    "EntryMetadata",
    "ProtocolRegistrar",
    "RecordStore",
    "RegistrationOptions",
    "RegistrationState",
    "SecondaryAction",
    "SubprocessExecutor",
    "SystemBinder",
    "build_entry_document",
    "purge_default_references",
    "render_entry_document",
    "validate_registration",
    "validate_registration_id",
    "write_desktop_entry",
]
