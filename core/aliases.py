"""Static vocabulary shared by the watch-list interpreter and tools.

English and French surface forms are mixed on purpose: users write both, often
in the same instruction.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

WANTED = "wanted"
SEEN = "seen"
DISLIKED = "disliked"
CANONICAL_STATUSES: Tuple[str, ...] = (WANTED, SEEN, DISLIKED)

ADD_VERBS: Tuple[str, ...] = (
    "add",
    "put",
    "include",
    "save",
    "ajoute",
    "ajouter",
    "mets",
    "mettre",
    "place",
    "placer",
)
REMOVE_VERBS: Tuple[str, ...] = (
    "remove",
    "delete",
    "drop",
    "retire",
    "retirer",
    "supprime",
    "supprimer",
    "enleve",
    "enlève",
    "enlever",
)
STATUS_VERBS: Tuple[str, ...] = ("mark", "set", "flag", "marque", "marquer", "mets", "mettre")

STATUS_ALIASES: Dict[str, str] = {
    WANTED: WANTED,
    "want to watch": WANTED,
    "want to see": WANTED,
    "to watch": WANTED,
    "wishlist": WANTED,
    "envie": WANTED,
    "liste d'envie": WANTED,
    SEEN: SEEN,
    "watched": SEEN,
    "already seen": SEEN,
    "deja_vu": SEEN,
    "deja vu": SEEN,
    "déjà vu": SEEN,
    "déjà-vu": SEEN,
    "deja-vu": SEEN,
    DISLIKED: DISLIKED,
    "dislike": DISLIKED,
    "not interested": DISLIKED,
    "uninterested": DISLIKED,
    "pas_interesse": DISLIKED,
    "pas interesse": DISLIKED,
    "pas interessé": DISLIKED,
    "pas intéressé": DISLIKED,
}

STATUS_PIVOTS: Tuple[str, ...] = ("as", "to", "comme", "en")
ADD_STOPS: Tuple[str, ...] = ("to", "into", "in", "on", "onto", "à", "dans", "sur")
REMOVE_STOPS: Tuple[str, ...] = ("from", "off", "de", "du", "des")
CONJUNCTIONS: Tuple[str, ...] = ("and", "then", "et", "puis")

QUOTE_CHARS = "\"“”„«»"

FILLER_WORDS: FrozenSet[str] = frozenset(
    {"my", "our", "your", "ma", "mon", "mes", "list", "liste", "wishlist", "watchlist", "d'envie"}
)
EDGE_WORDS: FrozenSet[str] = frozenset(
    {
        "the", "a", "an", "le", "la", "les", "de", "du", "des", "to", "into", "in", "on", "onto",
        "from", "à", "au", "aux", "dans", "sur",
    }
)


__all__ = [
    "WANTED",
    "SEEN",
    "DISLIKED",
    "CANONICAL_STATUSES",
    "ADD_VERBS",
    "REMOVE_VERBS",
    "STATUS_VERBS",
    "STATUS_ALIASES",
    "STATUS_PIVOTS",
    "ADD_STOPS",
    "REMOVE_STOPS",
    "CONJUNCTIONS",
    "QUOTE_CHARS",
    "FILLER_WORDS",
    "EDGE_WORDS",
]
