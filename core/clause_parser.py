"""Clause classification and title extraction for watch-list instructions."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Pattern, Sequence

from core.actions import Action, Add, Remove, SetStatus
from core.aliases import (
    ADD_STOPS,
    ADD_VERBS,
    CONJUNCTIONS,
    EDGE_WORDS,
    FILLER_WORDS,
    REMOVE_STOPS,
    REMOVE_VERBS,
    STATUS_ALIASES,
    STATUS_PIVOTS,
    STATUS_VERBS,
)
from core.normalizers import normalize_status, normalize_title
from core.segmenter import mask_quoted, quoted_spans


def _word_pattern(words: Iterable[str]) -> Pattern[str]:
    # Longest alternatives first so multi-word aliases win over their suffixes.
    ordered = sorted(set(words), key=len, reverse=True)
    alternation = "|".join(re.escape(word) for word in ordered)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


_STATUS_VERB_PATTERN = _word_pattern(STATUS_VERBS)
_STATUS_ALIAS_PATTERN = _word_pattern(STATUS_ALIASES)
_STATUS_PIVOT_PATTERN = _word_pattern(STATUS_PIVOTS)
_ADD_VERB_PATTERN = _word_pattern(ADD_VERBS)
_ADD_STOP_PATTERN = _word_pattern(ADD_STOPS)
_REMOVE_VERB_PATTERN = _word_pattern(REMOVE_VERBS)
_REMOVE_STOP_PATTERN = _word_pattern(REMOVE_STOPS)
_CONJUNCTION_PATTERN = _word_pattern(CONJUNCTIONS)
_LIST_SEPARATOR_PATTERN = re.compile(r"[,\n]")


def parse_clause(clause: str) -> List[Action]:
    """WHAT: turn one clause into zero or more watch-list actions.
    WHY: each clause carries at most one intent, so the first matching rule decides it.
    HOW: try status change, add, remove and bare quoted titles in that order;
    unrecognized clauses yield an empty list."""
    if not clause or not clause.strip():
        return []
    masked = mask_quoted(clause)

    actions = _parse_status_change(clause, masked)
    if actions is not None:
        return actions

    if _ADD_VERB_PATTERN.search(masked):
        titles = _extract_titles_after_verb(clause, masked, _ADD_VERB_PATTERN, _ADD_STOP_PATTERN)
        return [Add(title) for title in titles]

    if _REMOVE_VERB_PATTERN.search(masked):
        titles = _extract_titles_after_verb(clause, masked, _REMOVE_VERB_PATTERN, _REMOVE_STOP_PATTERN)
        return [Remove(title) for title in titles]

    return [Add(title) for title in extract_quoted_titles(clause)]


def extract_quoted_titles(text: str) -> List[str]:
    """Return the normalized content of every closed quoted region in ``text``."""

    titles: List[str] = []
    for start, end in quoted_spans(text):
        title = normalize_title(text[start + 1 : end - 1])
        if title:
            titles.append(title)
    return titles


def split_titles(text: str) -> List[str]:
    """Split an unquoted title list on commas, newlines and conjunctions."""

    joined = _CONJUNCTION_PATTERN.sub(",", text or "")
    titles: List[str] = []
    for piece in _LIST_SEPARATOR_PATTERN.split(joined):
        title = clean_title(piece)
        if title:
            titles.append(title)
    return titles


def clean_title(text: str) -> str:
    """Drop possessive/list filler anywhere and articles at the edges of ``text``."""

    tokens = [token for token in normalize_title(text).split(" ") if token]
    tokens = [token for token in tokens if token.lower() not in FILLER_WORDS]
    while tokens and tokens[0].lower() in EDGE_WORDS:
        tokens.pop(0)
    while tokens and tokens[-1].lower() in EDGE_WORDS:
        tokens.pop()
    return " ".join(tokens)


def _parse_status_change(clause: str, masked: str) -> Optional[List[Action]]:
    """WHAT: handle "mark X as seen" / "mets X en pas_interesse" clauses.
    WHY: a status verb without a recognizable status is not a status change, so
    ``None`` hands the clause to the next rule.
    HOW: the title list runs from the verb to the earliest pivot, and the status
    is the first alias from that pivot on. Without a pivot the title ends at
    the first alias after the verb. No title also returns ``None``."""
    verb = _STATUS_VERB_PATTERN.search(masked)
    alias = _STATUS_ALIAS_PATTERN.search(masked)
    if not verb or not alias:
        return None

    start = verb.end()
    pivot = _STATUS_PIVOT_PATTERN.search(masked, start)
    if pivot:
        end = pivot.start()
        # An alias word inside the title must not become the status.
        alias = _STATUS_ALIAS_PATTERN.search(masked, pivot.start()) or alias
    else:
        after_verb = _STATUS_ALIAS_PATTERN.search(masked, start)
        end = after_verb.start() if after_verb else len(clause)
    status = normalize_status(alias.group(0))

    segment = clause[start:end]
    titles = extract_quoted_titles(segment) or split_titles(segment)
    if not titles:
        return None
    return [SetStatus(title, status) for title in titles]


def _extract_titles_after_verb(
    clause: str,
    masked: str,
    verb_pattern: Pattern[str],
    stop_pattern: Pattern[str],
) -> List[str]:
    """Collect titles between the first verb and the next stop preposition.

    Quoted titles come first; the unquoted remainder is split and filtered.
    Duplicates inside the clause are dropped, keeping first-seen order.
    """
    verb = verb_pattern.search(masked)
    if not verb:
        return []
    start = verb.end()
    stop = stop_pattern.search(masked, start)
    end = stop.start() if stop else len(clause)

    window = clause[start:end]
    titles = extract_quoted_titles(window)
    titles.extend(split_titles(_without_quoted(window)))
    return _unique(titles)


def _without_quoted(text: str) -> str:
    pieces: List[str] = []
    cursor = 0
    for start, end in quoted_spans(text):
        pieces.append(text[cursor:start])
        cursor = end
    pieces.append(text[cursor:])
    # Comma keeps text on either side of a quote from fusing into one title.
    return ",".join(pieces)


def _unique(values: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(value for value in values if value))


__all__ = ["parse_clause", "extract_quoted_titles", "split_titles", "clean_title"]
