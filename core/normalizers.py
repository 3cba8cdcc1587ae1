"""Title and status normalization shared by the interpreter and the tools."""

from __future__ import annotations

import re
from typing import Any, Optional

from core.aliases import CANONICAL_STATUSES, QUOTE_CHARS, STATUS_ALIASES, WANTED

_QUOTE_PATTERN = re.compile(f"[{re.escape(QUOTE_CHARS)}]")


def strip_quotes(value: str) -> str:
    """Remove every quote character from ``value``."""

    return _QUOTE_PATTERN.sub("", value or "")


def normalize_title(value: Optional[str]) -> str:
    """Return ``value`` without quotes, trimmed, with single inner spaces."""

    if value is None:
        return ""
    return " ".join(strip_quotes(str(value)).split())


def resolve_status(value: Any) -> Optional[str]:
    """Map a status token to its canonical value, or ``None`` when unknown."""

    if value is None:
        return None
    key = " ".join(str(value).split()).lower()
    if not key:
        return None
    if key in CANONICAL_STATUSES:
        return key
    return STATUS_ALIASES.get(key)


def normalize_status(value: Any) -> str:
    """Lenient variant of :func:`resolve_status` that falls back to ``wanted``."""

    return resolve_status(value) or WANTED


__all__ = ["strip_quotes", "normalize_title", "resolve_status", "normalize_status"]
