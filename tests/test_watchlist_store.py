"""Tests for the JSON-backed watch-list store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tools.watchlist_store import WatchlistStore


def test_upsert_replaces_case_insensitively(tmp_path: Path) -> None:
    store = WatchlistStore(tmp_path / "watchlist.json")
    store.upsert("Dune", "wanted")
    store.upsert("dune", "seen")

    entries = store.list_entries()
    assert len(entries) == 1
    assert entries[0]["title"] == "dune"
    assert entries[0]["status"] == "seen"
    assert store.find_status("DUNE") == "seen"
    assert store.find_status("Heat") is None


def test_list_by_status_most_recent_first(tmp_path: Path) -> None:
    store = WatchlistStore(tmp_path / "watchlist.json")
    store.upsert("Alien", "wanted")
    store.upsert("Heat", "wanted")
    store.upsert("Dune", "disliked")

    assert store.list_by_status("wanted") == ["Heat", "Alien"]
    assert store.list_by_status("DISLIKED") == ["Dune"]
    assert store.list_by_status("seen") == []


def test_missing_file_is_an_empty_catalog(tmp_path: Path) -> None:
    store = WatchlistStore(tmp_path / "nested" / "watchlist.json")
    assert store.list_entries() == []
    store.upsert("Amélie", "wanted")
    raw = (tmp_path / "nested" / "watchlist.json").read_text(encoding="utf-8")
    assert "Amélie" in raw
    assert not (tmp_path / "nested" / "watchlist.json.tmp").exists()


def test_blank_file_is_an_empty_catalog(tmp_path: Path) -> None:
    path = tmp_path / "watchlist.json"
    path.write_text("  \n", encoding="utf-8")
    store = WatchlistStore(path)
    assert store.list_by_status("wanted") == []
    store.upsert("Heat", "seen")
    assert json.loads(path.read_text(encoding="utf-8"))["entries"][0]["title"] == "Heat"


def test_malformed_documents_raise(tmp_path: Path) -> None:
    path = tmp_path / "watchlist.json"
    path.write_text(json.dumps({"entries": {"title": "Heat"}}), encoding="utf-8")
    with pytest.raises(ValueError):
        WatchlistStore(path).list_entries()

    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        WatchlistStore(path).list_by_status("wanted")


def test_default_path_comes_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "configured.json"
    monkeypatch.setenv("WATCHLIST_STORAGE_PATH", str(path))
    store = WatchlistStore()
    store.upsert("Drive", "wanted")
    assert store.storage_path == path
    assert path.exists()
