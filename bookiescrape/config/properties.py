"""Properties file loading for BookieScrape configuration.

Reads the flat ``key=value`` format used by ``config.properties`` into an
immutable :class:`PropertyStore`. The grammar follows ``java.util.Properties``
so files written for the original desktop application keep working: ``#``/``!``
comment lines, ``=``/``:``/whitespace separators, backslash line continuations
and ``\\uXXXX`` escapes.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from bookiescrape.core.errors import ResourceLoadError
from bookiescrape.core.logger import get_logger

logger = get_logger("config.properties")

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertyStore(Mapping):
    """Read-only mapping of property keys to raw string values."""

    def __init__(self, entries: Mapping[str, str], source: str | Path = "<memory>") -> None:
        self._entries: Dict[str, str] = dict(entries)
        self._source = str(source)

    @property
    def source(self) -> str:
        """Identifier of the resource the properties were loaded from."""
        return self._source

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PropertyStore(source={self._source!r}, keys={len(self._entries)})"


def load_properties(path: str | Path) -> PropertyStore:
    """Load a properties file from disk.

    Args:
        path: Location of the ``.properties`` file.

    Returns:
        Immutable store holding every key of the file.

    Raises:
        ResourceLoadError: When the file is absent, is a directory, cannot be
            read or contains a malformed escape.
    """

    file_path = Path(path)
    if not file_path.exists():
        raise ResourceLoadError(file_path, "file not found")
    if file_path.is_dir():
        raise ResourceLoadError(file_path, "path is a directory")
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceLoadError(file_path, str(exc)) from exc

    store = parse_properties(text, source=file_path)
    logger.info("Loaded configuration", extra={"path": str(file_path), "keys": len(store)})
    return store


def parse_properties(text: str, source: str | Path = "<memory>") -> PropertyStore:
    """Parse properties text; later duplicates of a key override earlier ones."""

    entries: Dict[str, str] = {}
    for lineno, line in _logical_lines(text):
        key_raw, value_raw = _split_entry(line)
        try:
            key = _unescape(key_raw)
            value = _unescape(value_raw)
        except ValueError as exc:
            raise ResourceLoadError(source, f"line {lineno}: {exc}") from exc
        entries[key] = value
    return PropertyStore(entries, source=source)


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(first_line_number, logical_line)`` with continuations joined."""

    pending: List[str] = []
    start = 0
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip(_WHITESPACE)
        if not pending:
            if not line or line[0] in _COMMENT_MARKERS:
                continue
            start = lineno
        if _continues(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield start, "".join(pending)
        pending = []
    if pending:
        yield start, "".join(pending)


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> Tuple[str, str]:
    idx = 0
    escaped = False
    while idx < len(line):
        ch = line[idx]
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch in _SEPARATORS or ch in _WHITESPACE:
            break
        idx += 1

    rest = line[idx:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return line[:idx], rest


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value
    out: List[str] = []
    idx = 0
    while idx < len(value):
        ch = value[idx]
        idx += 1
        if ch != "\\":
            out.append(ch)
            continue
        if idx >= len(value):
            break
        ch = value[idx]
        idx += 1
        if ch == "u":
            digits = value[idx : idx + 4]
            if len(digits) != 4 or any(c not in string.hexdigits for c in digits):
                raise ValueError(f"malformed \\uXXXX escape: \\u{digits}")
            out.append(chr(int(digits, 16)))
            idx += 4
            continue
        out.append(_ESCAPES.get(ch, ch))
    return "".join(out)


__all__ = ["PropertyStore", "load_properties", "parse_properties"]
