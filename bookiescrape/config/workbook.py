"""Workbook-wide settings shared by every sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from bookiescrape.core.logger import get_logger

from .accessor import PropertyAccessor, RequiredKeyGuard
from .properties import PropertyStore

logger = get_logger("config.workbook")

EXCEL_FILE_PATH = "excel.file.path"
ALL_SHEETS = "all.sheets"
SHEET_FONT = "all.sheets.font"
SHEET_FONT_SIZE = "all.sheets.font.size"
COLS_SIZE_TO_FIT = "all.sheets.cols.sizetofit"
ROWS_SIZE_TO_FIT = "all.sheets.rows.sizetofit"

DEFAULT_FONT = "Calibri"
DEFAULT_FONT_SIZE = 11
DEFAULT_COLUMNS_AUTO_FIT = True
DEFAULT_ROWS_AUTO_FIT = False


@dataclass(frozen=True)
class GlobalSettings:
    """Output location, sheet order and shared formatting of the workbook."""

    output_path: str
    sheet_names: Tuple[str, ...]
    font: str = DEFAULT_FONT
    font_size: int = DEFAULT_FONT_SIZE
    columns_auto_fit: bool = DEFAULT_COLUMNS_AUTO_FIT
    rows_auto_fit: bool = DEFAULT_ROWS_AUTO_FIT


def split_sheet_names(raw: str) -> Tuple[str, ...]:
    """Split a comma separated list, trimming tokens and dropping empty ones."""

    return tuple(token.strip() for token in raw.split(",") if token.strip())


def resolve_global_settings(
    store: PropertyStore,
    *,
    output_path: Optional[str] = None,
) -> GlobalSettings:
    """Resolve the workbook-wide settings from ``store``.

    Args:
        store: Loaded properties.
        output_path: Overrides ``excel.file.path``; when given that key is no
            longer required.

    Raises:
        MissingRequiredKeyError: When ``excel.file.path`` (without override) or
            ``all.sheets`` is absent.
    """

    guard = RequiredKeyGuard(store)
    accessor = PropertyAccessor(store)

    if output_path is None:
        output_path = guard.require_string(EXCEL_FILE_PATH)
    sheet_names = split_sheet_names(guard.require_string(ALL_SHEETS))
    if not sheet_names:
        logger.warning("No sheets declared", extra={"source": store.source})

    return GlobalSettings(
        output_path=output_path,
        sheet_names=sheet_names,
        font=accessor.get_string(SHEET_FONT, DEFAULT_FONT),
        font_size=accessor.get_int(SHEET_FONT_SIZE, DEFAULT_FONT_SIZE),
        columns_auto_fit=accessor.get_bool(COLS_SIZE_TO_FIT, DEFAULT_COLUMNS_AUTO_FIT),
        rows_auto_fit=accessor.get_bool(ROWS_SIZE_TO_FIT, DEFAULT_ROWS_AUTO_FIT),
    )
