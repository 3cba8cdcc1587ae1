"""File-backed watch-list catalog keyed by case-insensitive title."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.config import get_storage_path, is_storage_logging_silent
from core.json_storage import atomic_write_json, read_json

logger = logging.getLogger(__name__)


@dataclass
class WatchlistEntry:
    """Represent a single catalog entry."""

    title: str
    status: str
    updated_at: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class WatchlistStore:
    """JSON storage for watch-list entries; implements ``WatchlistStorage``."""

    def __init__(self, storage_path: Path | None = None, *, silent: bool | None = None) -> None:
        self._storage_path = storage_path or get_storage_path()
        self._silent = is_storage_logging_silent() if silent is None else silent

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def upsert(self, title: str, status: str) -> None:
        """Replace any entry with the same title (ignoring case) by a fresh one."""

        key = title.lower()
        entries = [entry for entry in self._load_items() if entry.title.lower() != key]
        entries.append(WatchlistEntry(title=title, status=status, updated_at=_utc_timestamp()))
        self._write_items(entries)
        if not self._silent:
            logger.debug("Stored '%s' as %s in %s", title, status, self._storage_path)

    def list_by_status(self, status: str) -> List[str]:
        """Titles with ``status``, most recently updated first."""

        wanted = (status or "").strip().lower()
        indexed = [
            (entry.updated_at, idx, entry.title)
            for idx, entry in enumerate(self._load_items())
            if entry.status.lower() == wanted
        ]
        indexed.sort(reverse=True)
        return [title for _updated, _idx, title in indexed]

    def list_entries(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self._load_items()]

    def find_status(self, title: str) -> Optional[str]:
        key = (title or "").lower()
        for entry in self._load_items():
            if entry.title.lower() == key:
                return entry.status
        return None

    def _load_items(self) -> List[WatchlistEntry]:
        payload = read_json(self._storage_path, {"entries": []})
        if not isinstance(payload, dict):
            raise ValueError("Invalid watch-list format: expected a JSON object")
        raw_items = payload.get("entries", [])
        if not isinstance(raw_items, list):
            raise ValueError("Invalid watch-list format: 'entries' must be a list")

        entries: List[WatchlistEntry] = []
        for item in raw_items:
            if not isinstance(item, dict):
                continue
            entries.append(
                WatchlistEntry(
                    title=str(item.get("title", "")),
                    status=str(item.get("status", "")).strip().lower(),
                    updated_at=str(item.get("updated_at", "")).strip(),
                )
            )
        return entries

    def _write_items(self, items: List[WatchlistEntry]) -> None:
        payload = {"entries": [item.to_dict() for item in items]}
        atomic_write_json(self._storage_path, payload)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


__all__ = ["WatchlistStore", "WatchlistEntry"]
