"""Unit tests for properties file parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from bookiescrape.config.properties import PropertyStore, load_properties, parse_properties
from bookiescrape.core.errors import ResourceLoadError


def test_parse_skips_comments_and_blank_lines() -> None:
    store = parse_properties("# comment\n! also comment\n\n   \nkey=value\n")

    assert dict(store) == {"key": "value"}


def test_parse_accepts_all_separators() -> None:
    store = parse_properties("a=1\nb:2\nc 3\nd   =   4\ne\t:\tfive six\n")

    assert store["a"] == "1"
    assert store["b"] == "2"
    assert store["c"] == "3"
    assert store["d"] == "4"
    assert store["e"] == "five six"


def test_parse_unescapes_values_and_keys() -> None:
    store = parse_properties(
        "NFL.scrape.url=https\\://example.com/odds/\n"
        "my\\ key=tab\\there\n"
        "unicode=caf\\u00e9\n"
    )

    assert store["NFL.scrape.url"] == "https://example.com/odds/"
    assert store["my key"] == "tab\there"
    assert store["unicode"] == "café"


def test_parse_joins_continuation_lines() -> None:
    store = parse_properties("all.sheets=NFL,\\\n    NCAAF,\\\n    NBA\nnext=1\n")

    assert store["all.sheets"] == "NFL,NCAAF,NBA"
    assert store["next"] == "1"


def test_even_trailing_backslashes_do_not_continue() -> None:
    store = parse_properties("path=C:\\\\\nnext=1\n")

    assert store["path"] == "C:\\"
    assert store["next"] == "1"


def test_later_duplicate_keys_win() -> None:
    store = parse_properties("a=first\na=second\n")

    assert store["a"] == "second"
    assert len(store) == 1


def test_key_without_value_maps_to_empty_string() -> None:
    store = parse_properties("NFL.scrape.url=\nflag\n")

    assert store["NFL.scrape.url"] == ""
    assert store["flag"] == ""


def test_malformed_unicode_escape_raises() -> None:
    with pytest.raises(ResourceLoadError) as excinfo:
        parse_properties("ok=1\nbad=\\u12G4\n", source="broken.properties")

    assert "broken.properties" in str(excinfo.value)
    assert "line 2" in str(excinfo.value)


def test_store_is_read_only() -> None:
    store = parse_properties("a=1\n")

    assert isinstance(store, PropertyStore)
    with pytest.raises(TypeError):
        store["a"] = "2"  # type: ignore[index]


def test_load_properties_records_source(tmp_path: Path) -> None:
    path = tmp_path / "config.properties"
    path.write_text("excel.file.path=out.xlsx\n", encoding="utf-8")

    store = load_properties(path)

    assert store.source == str(path)
    assert store["excel.file.path"] == "out.xlsx"


def test_load_properties_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.properties"

    with pytest.raises(ResourceLoadError) as excinfo:
        load_properties(missing)

    assert excinfo.value.path == str(missing)
    assert str(missing) in str(excinfo.value)


def test_load_properties_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(ResourceLoadError, match="directory"):
        load_properties(tmp_path)
