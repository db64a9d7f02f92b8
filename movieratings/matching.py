"""Partial id / title matching against the catalog."""

from typing import Iterable

from thefuzz import fuzz

from .config import SUGGEST_THRESHOLD
from .models import Entry


def matches(query: str, entry: Entry) -> bool:
    """Id starts with query, or title contains it (case-insensitive)."""
    q = query.lower()
    return entry.id.lower().startswith(q) or q in entry.title.lower()


def resolve(query: str, entries: Iterable[Entry]) -> list[Entry]:
    """All matching entries, in catalog order. An empty query matches everything."""
    return [entry for entry in entries if matches(query, entry)]


def suggest(query: str, entries: Iterable[Entry], threshold: int = SUGGEST_THRESHOLD) -> Entry | None:
    """Closest title by fuzzy score, for "did you mean" hints. Never used to pick a match."""
    best = None
    best_score = 0
    for entry in entries:
        score = fuzz.token_set_ratio(query.lower(), entry.title.lower())
        if score > best_score:
            best_score = score
            best = entry
    if best_score >= threshold:
        return best
    return None
