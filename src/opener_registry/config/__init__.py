"""Configuration for opener-registry: path layout and settings.conf."""

from opener_registry.config.paths import XdgPaths, desktop_filename
from opener_registry.config.settings import (
    Settings,
    load_settings,
    parse_settings,
)

__all__ = [
    "Settings",
    "XdgPaths",
    "desktop_filename",
    "load_settings",
    "parse_settings",
]
