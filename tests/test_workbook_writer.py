"""Skeleton workbook output."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import load_workbook

from bookiescrape.config import build_snapshot, load_config, parse_properties
from bookiescrape.workbook_writer import skeleton_cells, worksheet_title, write_skeleton


def test_skeleton_places_titles_and_headers(sample_config: Path, tmp_path: Path) -> None:
    snapshot = load_config(sample_config)
    out = tmp_path / "out" / "odds.xlsx"

    written = write_skeleton(snapshot, out)

    assert written == out
    wb = load_workbook(out)
    assert wb.sheetnames == ["NFL", "NCAAF"]

    nfl = wb["NFL"]
    assert nfl["A1"].value == "NFL Football"
    assert nfl["A2"].value == "Teams"
    assert nfl["B2"].value == "Opener"
    assert nfl["C2"].value == "Bookie"
    assert nfl["A1"].font.name == "Arial"
    assert nfl["A1"].font.sz == 12

    ncaaf = wb["NCAAF"]
    assert ncaaf["A3"].value == "College Football"
    assert ncaaf["B4"].value == "Teams"
    assert ncaaf["C4"].value == "Bookie"
    assert ncaaf["D4"].value is None


def test_columns_are_widened_when_auto_fit(sample_config: Path, tmp_path: Path) -> None:
    out = write_skeleton(load_config(sample_config), tmp_path / "fit.xlsx")

    ws = load_workbook(out)["NFL"]
    assert ws.column_dimensions["A"].width == len("NFL Football") + 2


def test_skeleton_cells_use_one_based_coordinates() -> None:
    snapshot = build_snapshot(
        parse_properties(
            "excel.file.path=o.xlsx\nall.sheets=S\n"
            "S.sheet.title.row=0\nS.sheet.title.col=2\nS.sheet.table.opener=false\n"
        )
    )

    cells = skeleton_cells(snapshot.sheet(0))

    assert cells == [(1, 3, "S"), (2, 1, "Teams"), (2, 3, "Bookie")]


def test_duplicate_sheets_written_once(tmp_path: Path) -> None:
    snapshot = build_snapshot(parse_properties("excel.file.path=o.xlsx\nall.sheets=NFL,NFL\n"))

    out = write_skeleton(snapshot, tmp_path / "dup.xlsx")

    assert load_workbook(out).sheetnames == ["NFL"]


def test_defaults_to_configured_output_path(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "configured.xlsx"
    snapshot = build_snapshot(
        parse_properties("all.sheets=NFL\n"), output_path=str(target)
    )

    assert write_skeleton(snapshot) == target
    assert target.exists()


def test_dry_run_writes_nothing(sample_config: Path, tmp_path: Path) -> None:
    out = tmp_path / "dry.xlsx"

    assert write_skeleton(load_config(sample_config), out, dry_run=True) == out
    assert not out.exists()


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("NBA/WNBA", "NBA_WNBA"),
        ("Odds: [live]?", "Odds_ _live__"),
        ("A" * 40, "A" * 31),
        ("NFL", "NFL"),
    ],
)
def test_worksheet_title_is_excel_safe(name: str, expected: str) -> None:
    assert worksheet_title(name) == expected


def test_sheet_names_with_invalid_characters_are_written(tmp_path: Path) -> None:
    snapshot = build_snapshot(
        parse_properties("excel.file.path=o.xlsx\nall.sheets=NBA/WNBA\nNBA/WNBA.sheet.title=Hoops\n")
    )

    out = write_skeleton(snapshot, tmp_path / "slash.xlsx")

    ws = load_workbook(out)["NBA_WNBA"]
    assert ws["A1"].value == "Hoops"


def test_duplicates_are_detected_case_insensitively(tmp_path: Path) -> None:
    snapshot = build_snapshot(
        parse_properties(
            "excel.file.path=o.xlsx\nall.sheets=NFL,nfl\nNFL.sheet.title=Pro\nnfl.sheet.title=Other\n"
        )
    )

    out = write_skeleton(snapshot, tmp_path / "case.xlsx")

    wb = load_workbook(out)
    assert wb.sheetnames == ["NFL"]
    assert wb["NFL"]["A1"].value == "Pro"
