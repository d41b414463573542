"""Per-sheet layout resolution.

Every sheet reads its keys under the ``<Sheet>.`` prefix and resolves them as a
chain: title, teams column and opener flag first, then the table row, opener
column and bookie column, each clamped against the index it must follow::

    title_row  <  table_row
    teams_col  <  opener_col  <  bookie_col     (with an opener column)
    teams_col  <  bookie_col                    (without one)

A candidate that would overlap its predecessor is moved to ``predecessor + 1``
instead of being rejected, so resolution never fails. Every such move is
recorded as a :class:`LayoutAdjustment` and logged, a warning when the user set
the key explicitly and a debug record when only the default collided.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Tuple

from bookiescrape.core.logger import get_logger

from .accessor import PropertyAccessor

logger = get_logger("config.layout")

SCRAPE_URL = ".scrape.url"
SHEET_TITLE = ".sheet.title"
TITLE_ROW = ".sheet.title.row"
TITLE_COL = ".sheet.title.col"
TABLE_ROW = ".sheet.table.row"
TEAMS_COL = ".sheet.table.teams.col"
OPENER = ".sheet.table.opener"
OPENER_COL = ".sheet.table.opener.col"
BOOKIE_COL = ".sheet.table.bookie.col"

DEFAULT_TITLE_ROW = 0
DEFAULT_TITLE_COL = 0
DEFAULT_TABLE_ROW = 1
DEFAULT_TEAMS_COL = 0
DEFAULT_HAS_OPENER = True
DEFAULT_OPENER_COL = 1
DEFAULT_BOOKIE_COL = 2


@dataclass(frozen=True)
class SheetLayout:
    """Resolved, non-overlapping geometry of one worksheet (0-based indices)."""

    name: str
    scrape_url: str
    title: str
    title_row: int
    title_col: int
    table_row: int
    teams_col: int
    has_opener: bool
    opener_col: int
    bookie_col: int


@dataclass(frozen=True)
class LayoutAdjustment:
    """A candidate index that was moved past its structural predecessor."""

    sheet: str
    field: str
    key: str
    requested: int
    resolved: int
    explicit: bool

    def describe(self) -> str:
        origin = "configured" if self.explicit else "default"
        return f"{self.key}: {origin} value {self.requested} adjusted to {self.resolved}"


class SheetLayoutResolver:
    """Resolve :class:`SheetLayout` records from a property store."""

    def __init__(self, store: Mapping[str, str]) -> None:
        self._props = PropertyAccessor(store)

    def resolve(self, sheet: str) -> SheetLayout:
        layout, _ = self.resolve_with_adjustments(sheet)
        return layout

    def resolve_with_adjustments(self, sheet: str) -> Tuple[SheetLayout, Tuple[LayoutAdjustment, ...]]:
        """Resolve ``sheet`` and report every index that had to be clamped."""

        props = self._props
        adjustments: List[LayoutAdjustment] = []

        def floor(field: str, suffix: str, default: int, predecessor: int, report: bool = True) -> int:
            key = sheet + suffix
            candidate = props.get_int(key, default)
            if candidate > predecessor:
                return candidate
            resolved = predecessor + 1
            if not report:
                return resolved
            adjustment = LayoutAdjustment(
                sheet=sheet,
                field=field,
                key=key,
                requested=candidate,
                resolved=resolved,
                explicit=props.has(key),
            )
            adjustments.append(adjustment)
            if adjustment.explicit:
                logger.warning("Sheet index adjusted to avoid overlap: %s", adjustment.describe())
            else:
                logger.debug("Default sheet index adjusted: %s", adjustment.describe())
            return resolved

        title_row = props.get_int(sheet + TITLE_ROW, DEFAULT_TITLE_ROW)
        title_col = props.get_int(sheet + TITLE_COL, DEFAULT_TITLE_COL)
        teams_col = props.get_int(sheet + TEAMS_COL, DEFAULT_TEAMS_COL)
        has_opener = props.get_bool(sheet + OPENER, DEFAULT_HAS_OPENER)

        table_row = floor("table_row", TABLE_ROW, DEFAULT_TABLE_ROW, title_row)
        # Resolved even without an opener so the record stays deterministic;
        # an unused opener column is never reported as adjusted.
        opener_col = floor("opener_col", OPENER_COL, DEFAULT_OPENER_COL, teams_col, report=has_opener)
        bookie_floor = opener_col if has_opener else teams_col
        bookie_col = floor("bookie_col", BOOKIE_COL, DEFAULT_BOOKIE_COL, bookie_floor)

        layout = SheetLayout(
            name=sheet,
            scrape_url=props.get_string(sheet + SCRAPE_URL, ""),
            title=props.get_string(sheet + SHEET_TITLE, sheet),
            title_row=title_row,
            title_col=title_col,
            table_row=table_row,
            teams_col=teams_col,
            has_opener=has_opener,
            opener_col=opener_col,
            bookie_col=bookie_col,
        )
        return layout, tuple(adjustments)
