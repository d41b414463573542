"""Custom exceptions used across BookieScrape."""

from __future__ import annotations

from pathlib import Path


class BookieScrapeError(Exception):
    """Base error for the application."""


class ConfigError(BookieScrapeError):
    """Configuration related error."""


class ResourceLoadError(ConfigError):
    """Raised when the configuration resource cannot be opened or read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to load configuration from {self.path}: {reason}")


class MissingRequiredKeyError(ConfigError):
    """Raised when a mandatory configuration key is absent."""

    def __init__(self, key: str, source: str | Path) -> None:
        self.key = key
        self.source = str(source)
        super().__init__(
            f"Required property '{key}' not found in {self.source}; add it to the configuration file"
        )
