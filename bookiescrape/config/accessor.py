"""Typed access to raw property values.

``PropertyAccessor`` centralizes the parse-or-default rules so no caller has to
turn strings into ints or bools on its own; ``RequiredKeyGuard`` is the single
place where an absent key becomes fatal.
"""

from __future__ import annotations

import re
from typing import Mapping

from bookiescrape.core.errors import MissingRequiredKeyError
from bookiescrape.core.logger import get_logger

logger = get_logger("config.accessor")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class PropertyAccessor:
    """Read string, int and bool values, degrading to the caller's default."""

    def __init__(self, store: Mapping[str, str]) -> None:
        self._store = store

    def has(self, key: str) -> bool:
        return key in self._store

    def get_string(self, key: str, default: str) -> str:
        value = self._store.get(key)
        return value if value is not None else default

    def get_int(self, key: str, default: int) -> int:
        """Return a non-negative base-10 int, or ``default`` when absent, malformed or negative."""

        raw = self._store.get(key)
        if raw is None:
            return default
        text = raw.strip()
        if not _INT_PATTERN.fullmatch(text):
            logger.debug("Ignoring non-integer value", extra={"key": key, "value": raw})
            return default
        value = int(text)
        if value < 0:
            logger.debug("Ignoring negative index", extra={"key": key, "value": raw})
            return default
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        """Return ``default`` when absent; only a case-insensitive ``true`` is truthy."""

        raw = self._store.get(key)
        if raw is None:
            return default
        return raw.strip().lower() == "true"


class RequiredKeyGuard:
    """Fail fast on keys without which the configuration is meaningless."""

    def __init__(self, store: Mapping[str, str], source: str | None = None) -> None:
        self._store = store
        self._source = source if source is not None else getattr(store, "source", "<memory>")

    def require_string(self, key: str) -> str:
        value = self._store.get(key)
        if value is None:
            logger.error("Missing required property", extra={"key": key, "source": self._source})
            raise MissingRequiredKeyError(key, self._source)
        return value


__all__ = ["PropertyAccessor", "RequiredKeyGuard"]
