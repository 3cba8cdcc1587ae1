"""Tests for plan execution and summary rendering."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import pytest

from core.actions import Add, Remove, SetStatus
from core.orchestrator import EMPTY_PLAN_MESSAGE, NO_ACTION_MESSAGE, ExecutionResult, execute


class RecordingStorage:
    """In-memory storage double that can fail for selected titles."""

    def __init__(self, failing_titles: Iterable[str] = ()) -> None:
        self.calls: List[Tuple[str, str]] = []
        self._failing = set(failing_titles)

    def upsert(self, title: str, status: str) -> None:
        self.calls.append((title, status))
        if title in self._failing:
            raise RuntimeError("disk full")

    def list_by_status(self, status: str) -> List[str]:
        return [title for title, stored in self.calls if stored == status]


def test_empty_plan_makes_no_storage_calls():
    storage = RecordingStorage()
    assert execute([], storage) == EMPTY_PLAN_MESSAGE
    assert execute(None, storage) == EMPTY_PLAN_MESSAGE
    assert storage.calls == []


def test_actions_map_to_statuses():
    storage = RecordingStorage()
    summary = execute([Add("Drive"), Remove("Dune"), SetStatus("Heat", "déjà vu")], storage)
    assert storage.calls == [("Drive", "wanted"), ("Dune", "disliked"), ("Heat", "seen")]
    assert summary == "Added: Drive. Removed: Dune. Status changes: Heat → seen."


def test_unresolvable_status_is_reported_without_storage_call():
    storage = RecordingStorage()
    summary = execute([SetStatus("Heat", "bogus"), Add("Drive")], storage)
    assert storage.calls == [("Drive", "wanted")]
    assert summary == "Added: Drive. Errors: Heat → invalid status."


def test_storage_fault_is_isolated_per_action():
    storage = RecordingStorage(failing_titles={"Heat"})
    plan = [Add("Alien"), Add("Heat"), Remove("Parasite"), SetStatus("Drive", "seen")]
    summary = execute(plan, storage)
    assert [title for title, _ in storage.calls] == ["Alien", "Heat", "Parasite", "Drive"]
    assert summary == (
        "Added: Alien. Removed: Parasite. Status changes: Drive → seen. Errors: add 'Heat': disk full."
    )


def test_storage_fault_is_logged(caplog: pytest.LogCaptureFixture):
    storage = RecordingStorage(failing_titles={"Dune"})
    with caplog.at_level(logging.WARNING, logger="core.orchestrator"):
        execute([Remove("Dune")], storage)
    assert "remove 'Dune'" in caplog.text


def test_added_and_removed_are_deduplicated_but_storage_is_called():
    storage = RecordingStorage()
    summary = execute([Add("Heat"), Add("Heat"), Remove("Dune"), Remove("Dune")], storage)
    assert len(storage.calls) == 4
    assert summary == "Added: Heat. Removed: Dune."


def test_status_changes_are_not_deduplicated():
    storage = RecordingStorage()
    summary = execute([SetStatus("X", "seen"), SetStatus("X", "seen")], storage)
    assert summary == "Status changes: X → seen, X → seen."


def test_unsupported_action_is_reported():
    storage = RecordingStorage()
    summary = execute(["add Heat"], storage)  # type: ignore[list-item]
    assert storage.calls == []
    assert summary.startswith("Errors: unsupported action")


def test_empty_result_renders_fallback():
    assert ExecutionResult().render() == NO_ACTION_MESSAGE
