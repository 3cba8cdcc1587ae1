"""Execute watch-list plans against a storage collaborator.

The orchestrator walks a plan once, in order, issuing one ``upsert`` per
action. Failures are isolated per action: a storage fault or an unknown status
is recorded in the summary and the remaining actions still run. Nothing is
raised to the caller; the rendered summary is the only result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence

from core.actions import Action, Add, Remove, SetStatus, describe_action
from core.aliases import DISLIKED, WANTED
from core.normalizers import resolve_status

logger = logging.getLogger(__name__)

EMPTY_PLAN_MESSAGE = "No actions to perform."
NO_ACTION_MESSAGE = "No action recognized."
STATUS_ARROW = "→"


class WatchlistStorage(Protocol):
    def upsert(self, title: str, status: str) -> None:
        ...

    def list_by_status(self, status: str) -> List[str]:
        ...


@dataclass
class ExecutionResult:
    """Per-call accumulators for one plan execution."""

    added: Dict[str, None] = field(default_factory=dict)
    removed: Dict[str, None] = field(default_factory=dict)
    status_changes: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def record_added(self, title: str) -> None:
        self.added.setdefault(title, None)

    def record_removed(self, title: str) -> None:
        self.removed.setdefault(title, None)

    def render(self) -> str:
        """Join the non-empty sections in a fixed order."""

        sections = [
            ("Added", list(self.added)),
            ("Removed", list(self.removed)),
            ("Status changes", self.status_changes),
            ("Errors", self.errors),
        ]
        parts = [f"{label}: {', '.join(values)}." for label, values in sections if values]
        if not parts:
            return NO_ACTION_MESSAGE
        return " ".join(parts)


def execute(plan: Optional[Sequence[Action]], storage: WatchlistStorage) -> str:
    """Apply ``plan`` to ``storage`` and return the rendered summary."""

    if not plan:
        return EMPTY_PLAN_MESSAGE
    logger.debug("Executing watch-list plan with %d action(s)", len(plan))
    result = ExecutionResult()
    for action in plan:
        if not isinstance(action, (Add, Remove, SetStatus)):
            result.errors.append(f"unsupported action {action!r}")
            continue
        try:
            _apply(action, storage, result)
        except Exception as exc:
            logger.warning("Watch-list action failed: %s (%s)", describe_action(action), exc)
            result.errors.append(f"{describe_action(action)}: {exc}")
    return result.render()


def _apply(action: Action, storage: WatchlistStorage, result: ExecutionResult) -> None:
    if isinstance(action, Add):
        storage.upsert(action.title, WANTED)
        result.record_added(action.title)
    elif isinstance(action, Remove):
        storage.upsert(action.title, DISLIKED)
        result.record_removed(action.title)
    elif isinstance(action, SetStatus):
        status = resolve_status(action.status)
        if status is None:
            result.errors.append(f"{action.title} {STATUS_ARROW} invalid status")
            return
        storage.upsert(action.title, status)
        result.status_changes.append(f"{action.title} {STATUS_ARROW} {status}")
    else:
        raise TypeError(f"Unsupported action type: {type(action).__name__}")


__all__ = [
    "EMPTY_PLAN_MESSAGE",
    "NO_ACTION_MESSAGE",
    "WatchlistStorage",
    "ExecutionResult",
    "execute",
]
