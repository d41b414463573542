"""Skeleton workbook output for previewing resolved sheet layouts."""

# Module responsibilities:
# - Lay out title cells and table header labels exactly where a ConfigSnapshot places them.
# - Apply the shared font and sizing flags so a configuration can be checked in Excel before scraping.

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.workbook.child import INVALID_TITLE_REGEX
from openpyxl.worksheet.worksheet import Worksheet

from bookiescrape.config import ConfigSnapshot, GlobalSettings, SheetLayout
from bookiescrape.core.logger import get_logger

logger = get_logger("workbook_writer")

TEAMS_HEADER = "Teams"
OPENER_HEADER = "Opener"
BOOKIE_HEADER = "Bookie"

MAX_TITLE_LENGTH = 31
DEFAULT_TITLE = "Sheet"

# Excel's default row height (points) for 11pt Calibri.
_BASE_ROW_HEIGHT = 15.0
_BASE_FONT_SIZE = 11


def worksheet_title(name: str) -> str:
    """Map a sheet name onto a title Excel accepts: no `/ \\ ? * [ ] :`, at most 31 chars."""

    title = INVALID_TITLE_REGEX.sub("_", name)[:MAX_TITLE_LENGTH] or DEFAULT_TITLE
    if title != name:
        logger.info("Sheet name adjusted for Excel", extra={"sheet": name, "worksheet": title})
    return title


def skeleton_cells(layout: SheetLayout) -> List[Tuple[int, int, str]]:
    """Return ``(row, col, text)`` triples using 1-based openpyxl coordinates."""

    cells = [(layout.title_row + 1, layout.title_col + 1, layout.title)]
    header_row = layout.table_row + 1
    cells.append((header_row, layout.teams_col + 1, TEAMS_HEADER))
    if layout.has_opener:
        cells.append((header_row, layout.opener_col + 1, OPENER_HEADER))
    cells.append((header_row, layout.bookie_col + 1, BOOKIE_HEADER))
    return cells


def _fill_sheet(ws: Worksheet, layout: SheetLayout, settings: GlobalSettings) -> None:
    font = Font(name=settings.font, size=settings.font_size)
    widths: Dict[int, int] = {}
    for row, col, text in skeleton_cells(layout):
        cell = ws.cell(row=row, column=col, value=text)
        cell.font = font
        widths[col] = max(widths.get(col, 0), len(text))
        if not settings.rows_auto_fit:
            ws.row_dimensions[row].height = _BASE_ROW_HEIGHT * settings.font_size / _BASE_FONT_SIZE

    if settings.columns_auto_fit:
        for col, width in widths.items():
            ws.column_dimensions[get_column_letter(col)].width = width + 2


def write_skeleton(
    snapshot: ConfigSnapshot,
    out_path: Optional[Path] = None,
    *,
    dry_run: bool = False,
) -> Path:
    """Write one worksheet per declared sheet with titles and header labels.

    Args:
        snapshot: Resolved configuration.
        out_path: Destination workbook; defaults to ``settings.output_path``.
        dry_run: When True, skip file emission and only log the plan.

    Returns:
        Path of the (planned) workbook.
    """

    settings = snapshot.settings
    target = Path(out_path) if out_path else Path(settings.output_path)

    layouts: Dict[str, SheetLayout] = {}
    seen: Set[str] = set()
    for layout in snapshot.sheets:
        title = worksheet_title(layout.name)
        # Excel compares worksheet titles case-insensitively.
        if title.casefold() in seen:
            logger.info(
                "Sheet declared twice; keeping first layout",
                extra={"sheet": layout.name, "worksheet": title},
            )
            continue
        seen.add(title.casefold())
        layouts[title] = layout

    logger.info(
        "Starting skeleton write",
        extra={"output": str(target), "sheets": list(layouts)},
    )
    if dry_run:
        logger.info("Dry run: would write skeleton", extra={"output": str(target)})
        return target

    wb = Workbook()
    wb.remove(wb.active)
    for name, layout in layouts.items():
        ws = wb.create_sheet(title=name)
        _fill_sheet(ws, layout, settings)
    if not layouts:
        wb.create_sheet(title="Sheet1")

    target.parent.mkdir(parents=True, exist_ok=True)
    wb.save(target)
    logger.info("Skeleton written", extra={"output": str(target)})
    return target
