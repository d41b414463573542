"""Configuration loading for BookieScrape.

Loads ``config.properties`` into an immutable :class:`ConfigSnapshot`: global
workbook settings plus one non-overlapping :class:`SheetLayout` per declared
sheet. Build one snapshot at startup and pass it to whatever needs it.
"""

from __future__ import annotations

from bookiescrape.core.errors import ConfigError, MissingRequiredKeyError, ResourceLoadError

from .accessor import PropertyAccessor, RequiredKeyGuard
from .layout import LayoutAdjustment, SheetLayout, SheetLayoutResolver
from .properties import PropertyStore, load_properties, parse_properties
from .snapshot import (
    DEFAULT_CONFIG_PATH,
    ConfigSnapshot,
    build_snapshot,
    load_config,
    resolve_config_path,
)
from .workbook import GlobalSettings, resolve_global_settings

__all__ = [
    "ConfigError",
    "ConfigSnapshot",
    "DEFAULT_CONFIG_PATH",
    "GlobalSettings",
    "LayoutAdjustment",
    "MissingRequiredKeyError",
    "PropertyAccessor",
    "PropertyStore",
    "RequiredKeyGuard",
    "ResourceLoadError",
    "SheetLayout",
    "SheetLayoutResolver",
    "build_snapshot",
    "load_config",
    "load_properties",
    "parse_properties",
    "resolve_config_path",
    "resolve_global_settings",
]
