"""Immutable configuration snapshot handed to scrapers and workbook writers."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from bookiescrape.core.logger import get_logger

from .layout import LayoutAdjustment, SheetLayout, SheetLayoutResolver
from .properties import PropertyStore, load_properties
from .workbook import GlobalSettings, resolve_global_settings

load_dotenv(override=False)

logger = get_logger("config.snapshot")

CONFIG_PATH_ENV = "BOOKIESCRAPE_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "config.properties"


@dataclass(frozen=True)
class ConfigSnapshot:
    """Global settings plus one layout per declared sheet name.

    Attributes:
        source: Identifier of the properties resource.
        settings: Workbook-wide settings.
        sheets: Layouts aligned 1:1 with ``settings.sheet_names``.
        adjustments: Every index clamped while resolving ``sheets``.
    """

    source: str
    settings: GlobalSettings
    sheets: Tuple[SheetLayout, ...]
    adjustments: Tuple[LayoutAdjustment, ...] = ()

    def sheet(self, index: int) -> SheetLayout:
        return self.sheets[index]

    def sheet_by_name(self, name: str) -> SheetLayout:
        """Return the first layout declared as ``name``."""

        for layout in self.sheets:
            if layout.name == name:
                return layout
        raise KeyError(f"Sheet '{name}' is not declared in {self.source}")

    def adjustments_for(self, name: str) -> Tuple[LayoutAdjustment, ...]:
        return tuple(item for item in self.adjustments if item.sheet == name)

    def to_dict(self) -> Dict[str, Any]:
        settings = asdict(self.settings)
        settings["sheet_names"] = list(self.settings.sheet_names)
        return {
            "source": self.source,
            "settings": settings,
            "sheets": [asdict(layout) for layout in self.sheets],
            "adjustments": [asdict(item) for item in self.adjustments],
        }


def build_snapshot(store: PropertyStore, *, output_path: Optional[str] = None) -> ConfigSnapshot:
    """Resolve global settings once, then every declared sheet in order.

    Raises:
        MissingRequiredKeyError: Propagated from the global settings; sheet
            resolution itself cannot fail.
    """

    settings = resolve_global_settings(store, output_path=output_path)
    resolver = SheetLayoutResolver(store)

    sheets: List[SheetLayout] = []
    adjustments: List[LayoutAdjustment] = []
    for name in settings.sheet_names:
        layout, clamped = resolver.resolve_with_adjustments(name)
        sheets.append(layout)
        adjustments.extend(clamped)

    logger.info(
        "Configuration resolved",
        extra={"source": store.source, "sheets": len(sheets), "adjusted": len(adjustments)},
    )
    return ConfigSnapshot(
        source=store.source,
        settings=settings,
        sheets=tuple(sheets),
        adjustments=tuple(adjustments),
    )


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Pick the explicit path, then ``$BOOKIESCRAPE_CONFIG``, then ``./config/config.properties``."""

    if path:
        return Path(path)
    env = os.getenv(CONFIG_PATH_ENV)
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def load_config(
    path: str | Path | None = None,
    *,
    output_path: Optional[str] = None,
) -> ConfigSnapshot:
    """Load the properties file and resolve it into a :class:`ConfigSnapshot`.

    Raises:
        ResourceLoadError: When the properties file cannot be read.
        MissingRequiredKeyError: When a mandatory key is absent.
    """

    store = load_properties(resolve_config_path(path))
    return build_snapshot(store, output_path=output_path)
