"""Logging helpers for the bookiescrape package."""

# Module responsibilities:
# - Centralize logging configuration with rotating file + stream handlers.
# - Provide get_logger() that ensures the log directory exists and configuration occurs once.

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "bookiescrape"
LOG_DIR_ENV = "BOOKIESCRAPE_LOG_DIR"
DEFAULT_LOG_BASE = Path.home() / "BookieScrape" / "logs"

_LOG_CONFIGURED = False


def _resolve_log_dir(log_dir: Optional[Path] = None) -> Path:
    """Resolve the log directory, ensuring existence."""
    if log_dir is not None:
        target = Path(log_dir)
    else:
        env = os.getenv(LOG_DIR_ENV)
        target = Path(env) if env else DEFAULT_LOG_BASE
    target.mkdir(parents=True, exist_ok=True)
    return target


def _configure_logging(log_dir: Optional[Path] = None) -> None:
    """Configure the package logger once with rotating file + console handlers."""
    global _LOG_CONFIGURED
    if _LOG_CONFIGURED:
        return

    log_path = _resolve_log_dir(log_dir) / "bookiescrape.log"

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(
        log_path, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    # stdout is reserved for command output.
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console)
    root_logger.propagate = False

    _LOG_CONFIGURED = True


def get_logger(name: str | None = None, log_dir: Optional[Path] = None) -> logging.Logger:
    """Return a package-scoped logger.

    Args:
        name: Logger name suffix appended to the ``bookiescrape`` namespace. When
            omitted the package root logger is returned.
        log_dir: Optional override for the logging directory. Only honoured by the
            first call, which performs the configuration.

    Returns:
        Configured logger scoped under ``bookiescrape``.
    """

    _configure_logging(log_dir)
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Detach and close the package handlers so the next get_logger() reconfigures."""
    global _LOG_CONFIGURED
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _LOG_CONFIGURED = False
