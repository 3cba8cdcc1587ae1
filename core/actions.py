"""Watch-list actions produced by the interpreter and consumed by the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union


@dataclass(frozen=True)
class Add:
    """Put ``title`` on the wishlist."""

    title: str


@dataclass(frozen=True)
class Remove:
    """Take ``title`` off the wishlist by marking it disliked."""

    title: str


@dataclass(frozen=True)
class SetStatus:
    title: str
    status: str


Action = Union[Add, Remove, SetStatus]
Plan = List[Action]


def describe_action(action: Action) -> str:
    """Return a short human description of ``action`` for summaries and logs."""

    if isinstance(action, Add):
        return f"add '{action.title}'"
    if isinstance(action, Remove):
        return f"remove '{action.title}'"
    if isinstance(action, SetStatus):
        return f"set '{action.title}' to {action.status}"
    raise TypeError(f"Unsupported action type: {type(action).__name__}")


__all__ = ["Add", "Remove", "SetStatus", "Action", "Plan", "describe_action"]
