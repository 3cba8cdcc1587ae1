"""Interpret free-form watch-list instructions and execute the resulting plan."""

from __future__ import annotations

import logging
import re
from typing import Optional

from core.actions import Plan
from core.aliases import CONJUNCTIONS
from core.clause_parser import parse_clause
from core.orchestrator import EMPTY_PLAN_MESSAGE, NO_ACTION_MESSAGE, WatchlistStorage, execute
from core.segmenter import split_clauses

logger = logging.getLogger(__name__)

_JOINER_PATTERN = re.compile(
    r"(?<!\w)(?:" + "|".join(re.escape(word) for word in CONJUNCTIONS) + r")(?!\w)|[;.]",
    re.IGNORECASE,
)
_VERB_STEMS = (
    "add",
    "remove",
    "delete",
    "mark",
    "set ",
    "put ",
    "ajout",
    "mets ",
    "met ",
    "marque",
    "supprim",
    "retir",
    "enlèv",
    "enlev",
)


def build_plan(instruction: Optional[str]) -> Plan:
    """Return the ordered actions for ``instruction``, clause by clause."""

    plan: Plan = []
    for clause in split_clauses(instruction):
        plan.extend(parse_clause(clause))
    return plan


def interpret_and_execute(instruction: Optional[str], storage: WatchlistStorage) -> str:
    """WHAT: run one instruction end to end and return the summary text.
    WHY: callers only ever get a string back; storage faults and unknown
    statuses are reported inside it.
    HOW: blank input short-circuits, an empty plan means nothing was
    recognized, anything else goes to :func:`core.orchestrator.execute`."""
    if not instruction or not instruction.strip():
        return EMPTY_PLAN_MESSAGE
    plan = build_plan(instruction)
    if not plan:
        logger.debug("No watch-list action recognized in instruction")
        return NO_ACTION_MESSAGE
    return execute(plan, storage)


def should_force_multi(text: Optional[str]) -> bool:
    """Return True when ``text`` joins several clauses and mentions an action verb."""

    if not text:
        return False
    lowered = text.lower()
    has_joiner = bool(_JOINER_PATTERN.search(lowered))
    has_verb = any(stem in lowered for stem in _VERB_STEMS)
    return has_joiner and has_verb


__all__ = ["build_plan", "interpret_and_execute", "should_force_multi"]
