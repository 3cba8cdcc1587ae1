"""Split a free-form instruction into single-action clauses."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from core.aliases import CONJUNCTIONS, QUOTE_CHARS

_MASK_CHAR = "_"
_DELIMITER_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(word) for word in CONJUNCTIONS) + r")\b|[.;]",
    re.IGNORECASE,
)


def quoted_spans(text: str) -> List[Tuple[int, int]]:
    """Return ``(start, end)`` offsets of closed quoted regions, quotes included."""

    spans: List[Tuple[int, int]] = []
    opened_at: Optional[int] = None
    for idx, char in enumerate(text):
        if char not in QUOTE_CHARS:
            continue
        if opened_at is None:
            opened_at = idx
        else:
            spans.append((opened_at, idx + 1))
            opened_at = None
    return spans


def mask_quoted(text: str) -> str:
    """Blank out quoted content so keyword searches only see unquoted text.

    The result has the same length as ``text``; offsets found in the mask are
    valid in the input string.
    """

    chars = list(text)
    for start, end in quoted_spans(text):
        for idx in range(start + 1, end - 1):
            chars[idx] = _MASK_CHAR
    return "".join(chars)


def split_clauses(instruction: Optional[str]) -> List[str]:
    """Split ``instruction`` on conjunctions and ``.``/``;`` outside quotes."""

    if not instruction or not instruction.strip():
        return []
    masked = mask_quoted(instruction)
    clauses: List[str] = []
    cursor = 0
    for match in _DELIMITER_PATTERN.finditer(masked):
        clauses.append(instruction[cursor : match.start()])
        cursor = match.end()
    clauses.append(instruction[cursor:])
    return [clause.strip() for clause in clauses if clause.strip()]


__all__ = ["quoted_spans", "mask_quoted", "split_clauses"]
