"""Watch-list tools: bulk edits, single-title edits, queries and maintenance.

Every tool works against a ``WatchlistStorage`` and reuses the shared
normalizers, so titles arrive trimmed and quote-free and statuses resolve
leniently (unknown values become ``wanted``). ``run`` exposes them behind one
payload-driven entry point for dispatchers.
"""

from __future__ import annotations

import random
import re
from typing import Any, Dict, List, Optional

from core.aliases import CANONICAL_STATUSES, DISLIKED, SEEN, WANTED
from core.command_interpreter import interpret_and_execute
from core.normalizers import normalize_status, normalize_title
from core.orchestrator import WatchlistStorage
from tools.watchlist_store import WatchlistStore

_LIST_SPLIT_PATTERN = re.compile(r"[,\n]")
_ACTION_ALIASES = {
    "": "list",
    "list": "list",
    "show": "list",
    "interpret": "interpret",
    "mixed": "interpret",
    "mixed_actions": "interpret",
    "multi": "interpret",
    "add": "add",
    "wishlist": "add",
    "remove": "remove",
    "delete": "remove",
    "add_many": "add_many",
    "remove_many": "remove_many",
    "set_many_status": "set_many_status",
    "set_status": "set_status",
    "status": "set_status",
    "mark_seen": "mark_seen",
    "seen": "mark_seen",
    "mark_disliked": "mark_disliked",
    "disliked": "mark_disliked",
    "rename": "rename",
    "stats": "stats",
    "prune": "prune",
    "prune_blanks": "prune",
    "next": "pick_next",
    "pick_next": "pick_next",
}


# ---------------------------------------------------------------------------
# Bulk tools
# ---------------------------------------------------------------------------
def split_title_list(titles: Optional[str]) -> List[str]:
    """Split a comma/newline separated list into normalized, non-blank titles."""

    if not titles:
        return []
    normalized = (normalize_title(part) for part in _LIST_SPLIT_PATTERN.split(titles))
    return [title for title in normalized if title]


def add_many(titles: Optional[str], store: WatchlistStorage) -> int:
    return set_many_status(titles, WANTED, store)


def remove_many(titles: Optional[str], store: WatchlistStorage) -> int:
    return set_many_status(titles, DISLIKED, store)


def set_many_status(titles: Optional[str], status: Optional[str], store: WatchlistStorage) -> int:
    """Apply ``status`` to every listed title and return how many were written."""

    canonical = normalize_status(status)
    count = 0
    for title in split_title_list(titles):
        store.upsert(title, canonical)
        count += 1
    return count


# ---------------------------------------------------------------------------
# Single-title tools
# ---------------------------------------------------------------------------
def add_to_wishlist(title: Optional[str], store: WatchlistStorage) -> List[str]:
    """Add one title, or several when the caller slipped in a list."""

    raw = title or ""
    if "," in raw or "\n" in raw:
        titles = split_title_list(raw)
    else:
        cleaned = normalize_title(raw)
        titles = [cleaned] if cleaned else []
    for item in titles:
        store.upsert(item, WANTED)
    return titles


def remove_from_wishlist(title: Optional[str], store: WatchlistStorage) -> Optional[str]:
    return set_status(title, DISLIKED, store)


def mark_as_seen(title: Optional[str], store: WatchlistStorage) -> Optional[str]:
    return set_status(title, SEEN, store)


def mark_as_disliked(title: Optional[str], store: WatchlistStorage) -> Optional[str]:
    return set_status(title, DISLIKED, store)


def set_status(title: Optional[str], status: Optional[str], store: WatchlistStorage) -> Optional[str]:
    """Store ``title`` with a leniently resolved status; ``None`` for a blank title."""

    cleaned = normalize_title(title)
    if not cleaned:
        return None
    store.upsert(cleaned, normalize_status(status))
    return cleaned


def mixed_actions(instruction: Optional[str], store: WatchlistStorage) -> str:
    return interpret_and_execute(instruction, store)


# ---------------------------------------------------------------------------
# Queries and maintenance
# ---------------------------------------------------------------------------
def get_list_by_status(status: Optional[str], store: WatchlistStorage) -> List[str]:
    """Normalized, distinct, non-blank titles for ``status``."""

    titles = (normalize_title(title) for title in store.list_by_status(normalize_status(status)))
    return list(dict.fromkeys(title for title in titles if title))


def get_list_by_status_sorted(status: Optional[str], order: Optional[str], store: WatchlistStorage) -> List[str]:
    titles = sorted(get_list_by_status(status, store), key=str.lower)
    if (order or "").strip().lower() == "desc":
        titles.reverse()
    return titles


def get_stats(store: WatchlistStorage) -> Dict[str, int]:
    stats = {status: len(store.list_by_status(status)) for status in CANONICAL_STATUSES}
    stats["total"] = sum(stats.values())
    return stats


def rename_title(old_title: Optional[str], new_title: Optional[str], store: WatchlistStore) -> Optional[str]:
    """Copy the old title's status to the new title and retire the old one.

    Returns the status carried over, or ``None`` when either title is blank.
    """

    old_cleaned = normalize_title(old_title)
    new_cleaned = normalize_title(new_title)
    if not old_cleaned or not new_cleaned:
        return None
    status = store.find_status(old_cleaned) or WANTED
    store.upsert(new_cleaned, status)
    store.upsert(old_cleaned, DISLIKED)
    return status


def prune_blanks(status: Optional[str], store: WatchlistStorage) -> int:
    """Mark entries whose title is empty once normalized as disliked."""

    count = 0
    for title in store.list_by_status(normalize_status(status)):
        if not normalize_title(title):
            store.upsert(title, DISLIKED)
            count += 1
    return count


def pick_next_to_watch(
    strategy: Optional[str],
    store: WatchlistStorage,
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """Pick the next wishlist title: ``first`` or a random one by default."""

    candidates = get_list_by_status(WANTED, store)
    if not candidates:
        return None
    if (strategy or "").strip().lower() == "first":
        return candidates[0]
    return (rng or random.Random()).choice(candidates)


# ---------------------------------------------------------------------------
# Payload entry point
# ---------------------------------------------------------------------------
def run(payload: Dict[str, Any], *, store: Optional[WatchlistStorage] = None) -> Dict[str, Any]:
    """Handle watch-list commands driven by a dispatcher."""

    action = _normalize_action(payload.get("action"))
    store = store or WatchlistStore()

    if action == "interpret":
        instruction = payload.get("instruction") or payload.get("message")
        summary = interpret_and_execute(instruction, store)
        return _response("interpret", summary=summary)

    if action == "add":
        added = add_to_wishlist(_extract_title(payload), store)
        if not added:
            return _error_response("add", "missing_title", "A title is required.")
        return _response("add", titles=added, count=len(added))

    if action in {"add_many", "remove_many", "set_many_status"}:
        titles = payload.get("titles")
        if action == "add_many":
            status = WANTED
        elif action == "remove_many":
            status = DISLIKED
        else:
            status = normalize_status(payload.get("status"))
        count = set_many_status(titles, status, store)
        return _response(action, count=count, status=status)

    if action in {"remove", "mark_seen", "mark_disliked", "set_status"}:
        status = {
            "remove": DISLIKED,
            "mark_seen": SEEN,
            "mark_disliked": DISLIKED,
        }.get(action) or normalize_status(payload.get("status"))
        title = set_status(_extract_title(payload), status, store)
        if not title:
            return _error_response(action, "missing_title", "A title is required.")
        return _response(action, title=title, status=status)

    if action == "list":
        status = normalize_status(payload.get("status"))
        if payload.get("order"):
            titles = get_list_by_status_sorted(status, str(payload["order"]), store)
        else:
            titles = get_list_by_status(status, store)
        return _response("list", status=status, titles=titles, count=len(titles))

    if action == "stats":
        return _response("stats", stats=get_stats(store))

    if action == "rename":
        carried = rename_title(payload.get("old_title"), payload.get("new_title"), store)
        if carried is None:
            return _error_response("rename", "missing_title", "Both the old and the new title are required.")
        return _response(
            "rename",
            old_title=normalize_title(payload.get("old_title")),
            new_title=normalize_title(payload.get("new_title")),
            status=carried,
        )

    if action == "prune":
        status = normalize_status(payload.get("status"))
        return _response("prune", status=status, count=prune_blanks(status, store))

    if action == "pick_next":
        return _response("pick_next", title=pick_next_to_watch(payload.get("strategy"), store))

    return _error_response(action, "unsupported_action", f"Unsupported watch-list action '{action}'.")


def format_watchlist_response(result: Dict[str, Any]) -> str:
    """Render a human-friendly line for a ``run`` result."""

    if "error" in result:
        return result.get("message", "Watch-list action failed.")

    action = result.get("action")
    if action == "interpret":
        return result.get("summary", "")
    if action == "add":
        return f"Added to wishlist: {', '.join(result.get('titles') or [])}."
    if action in {"add_many", "remove_many", "set_many_status"}:
        return f"Updated {result.get('count', 0)} title(s) to {result.get('status')}."
    if action in {"remove", "mark_seen", "mark_disliked", "set_status"}:
        return f"'{result.get('title')}' is now {result.get('status')}."
    if action == "list":
        titles = result.get("titles") or []
        if not titles:
            return f"No titles marked {result.get('status')}."
        lines = [f"- {title}" for title in titles]
        return f"Titles marked {result.get('status')}:\n" + "\n".join(lines)
    if action == "stats":
        stats = result.get("stats") or {}
        counts = " | ".join(f"{status}={stats.get(status, 0)}" for status in CANONICAL_STATUSES)
        return f"total={stats.get('total', 0)} | {counts}"
    if action == "rename":
        return f"Renamed '{result.get('old_title')}' to '{result.get('new_title')}' ({result.get('status')})."
    if action == "prune":
        return f"Pruned {result.get('count', 0)} blank title(s) from {result.get('status')}."
    if action == "pick_next":
        title = result.get("title")
        return f"Next up: {title}" if title else "Your wishlist is empty."
    return "Watch-list request completed."


def _normalize_action(raw_action: Any) -> str:
    value = str(raw_action or "").strip().lower()
    return _ACTION_ALIASES.get(value, value)


def _extract_title(payload: Dict[str, Any]) -> Optional[str]:
    for key in ("title", "titles", "message"):
        value = payload.get(key)
        if value is not None and str(value).strip():
            return str(value)
    return None


def _response(action: str, **fields: Any) -> Dict[str, Any]:
    return {"type": "watchlist", "domain": "watchlist", "action": action, **fields}


def _error_response(action: str, code: str, message: str) -> Dict[str, Any]:
    return _response(action, error=code, message=message)


__all__ = [
    "split_title_list",
    "add_many",
    "remove_many",
    "set_many_status",
    "add_to_wishlist",
    "remove_from_wishlist",
    "mark_as_seen",
    "mark_as_disliked",
    "set_status",
    "mixed_actions",
    "get_list_by_status",
    "get_list_by_status_sorted",
    "get_stats",
    "rename_title",
    "prune_blanks",
    "pick_next_to_watch",
    "run",
    "format_watchlist_response",
]
