from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep test runs from writing into ~/BookieScrape/logs.
os.environ.setdefault("BOOKIESCRAPE_LOG_DIR", tempfile.mkdtemp(prefix="bookiescrape-logs-"))


SAMPLE_PROPERTIES = """\
# path to Excel file
excel.file.path=./out/odds.xlsx

all.sheets=NFL, NCAAF

all.sheets.font=Arial
all.sheets.font.size=12
all.sheets.cols.sizetofit=true
all.sheets.rows.sizetofit=false

NFL.scrape.url=https\\://classic.sportsbookreview.com/betting-odds/nfl-football/money-line/
NFL.sheet.title=NFL Football
NFL.sheet.title.row=0
NFL.sheet.title.col=0
NFL.sheet.table.row=1
NFL.sheet.table.teams.col=0
NFL.sheet.table.opener=true
NFL.sheet.table.opener.col=1
NFL.sheet.table.bookie.col=2

NCAAF.sheet.title=College Football
NCAAF.sheet.title.row=2
NCAAF.sheet.table.row=1
NCAAF.sheet.table.teams.col=1
NCAAF.sheet.table.opener=false
NCAAF.sheet.table.bookie.col=1
"""


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BOOKIESCRAPE_CONFIG", raising=False)


@pytest.fixture
def write_properties(tmp_path: Path) -> Callable[[str], Path]:
    """Write properties text into ``tmp_path`` and return the file path."""

    def _write(text: str, name: str = "config.properties") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config(write_properties: Callable[[str], Path]) -> Path:
    return write_properties(SAMPLE_PROPERTIES)
