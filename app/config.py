"""Centralize defaults and environment lookups for the watch-list tools."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Default configuration values
# ---------------------------------------------------------------------------
_DEFAULT_STORAGE_PATH = "data_pipeline/watchlist.json"
_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_STORAGE_SILENT: bool = False
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


# ---------------------------------------------------------------------------
# Environment-derived settings
# ---------------------------------------------------------------------------
def get_storage_path(env: Dict[str, str] | None = None) -> Path:
    """Return the JSON file that holds the watch-list catalog.

    Args:
        env: Optional mapping used instead of ``os.environ`` to simplify testing.
    """

    source = env if env is not None else os.environ
    override = source.get("WATCHLIST_STORAGE_PATH")
    return Path(override) if override else Path(_DEFAULT_STORAGE_PATH)


def is_storage_logging_silent(env: Dict[str, str] | None = None) -> bool:
    """Determine whether the store should skip its write/read log lines."""

    source = env if env is not None else os.environ
    return _parse_bool(source.get("WATCHLIST_STORAGE_SILENT"), _DEFAULT_STORAGE_SILENT)


def get_log_level(env: Dict[str, str] | None = None) -> int:
    """Return the numeric ``logging`` level named by ``LOG_LEVEL``."""

    source = env if env is not None else os.environ
    raw = (source.get("LOG_LEVEL") or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    return logging.getLevelName(_DEFAULT_LOG_LEVEL)


def configure_logging(env: Dict[str, str] | None = None) -> None:
    logging.basicConfig(level=get_log_level(env), format=_LOG_FORMAT)


__all__ = [
    "get_storage_path",
    "is_storage_logging_silent",
    "get_log_level",
    "configure_logging",
]
