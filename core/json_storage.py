"""JSON document helpers for the watch-list file.

The store keeps one ``{"entries": [...]}`` document on disk. Reads tolerate a
missing or empty file (a fresh catalog); writes go through a sibling ``.tmp``
file so a crash never leaves a half-written catalog behind.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")


def read_json(path: Path, default: T) -> T:
    """Load the watch-list document, or ``default`` for a fresh catalog.

    A file that exists but does not parse raises ``json.JSONDecodeError`` so a
    corrupted catalog is never silently replaced by an empty one.
    """

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return default
    if not raw.strip():
        return default
    return json.loads(raw)


def atomic_write_json(path: Path, payload: Any) -> None:
    """Replace the watch-list document at ``path`` with ``payload``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    # Accented titles ("Amélie") stay readable in the file.
    tmp_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    os.replace(tmp_path, path)


__all__ = ["read_json", "atomic_write_json"]
