"""In-memory catalog keyed by movie id, with a read-through lookup cache."""

import logging
import secrets
from typing import Callable

from .config import ID_LENGTH, ID_ALPHABET, ID_MAX_ATTEMPTS
from .errors import IdExhaustionError
from .models import Entry

logger = logging.getLogger(__name__)


def random_token() -> str:
    """Random ID_LENGTH-char token drawn from ID_ALPHABET."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


class CatalogStore:
    """
    Owns the id -> Entry mapping.

    The cache only ever holds references to the same Entry objects as
    `entries`; put() and delete() evict so a cached reference never outlives
    or diverges from its catalog entry.
    """

    def __init__(self, token_factory: Callable[[], str] = random_token,
                 max_attempts: int = ID_MAX_ATTEMPTS):
        self.entries: dict[str, Entry] = {}
        self._cache: dict[str, Entry] = {}
        self._token_factory = token_factory
        self._max_attempts = max_attempts

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, movie_id: str) -> bool:
        return movie_id.upper() in self.entries

    def put(self, entry: Entry) -> None:
        """Insert or overwrite an entry by id."""
        entry.id = entry.id.upper()
        self._cache.pop(entry.id, None)
        self.entries[entry.id] = entry

    def get(self, movie_id: str) -> Entry | None:
        """Exact-id lookup (case-insensitive), cache first."""
        key = movie_id.upper()
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        entry = self.entries.get(key)
        if entry is not None:
            self._cache[key] = entry
        return entry

    def delete(self, movie_id: str) -> bool:
        """Remove an entry and its cached reference. Returns whether it existed."""
        key = movie_id.upper()
        self._cache.pop(key, None)
        return self.entries.pop(key, None) is not None

    def all(self) -> list[Entry]:
        """All entries in insertion order."""
        return list(self.entries.values())

    def cached_ids(self) -> list[str]:
        return list(self._cache)

    def generate_id(self) -> str:
        """Fresh id not used by any live entry.

        Raises:
            IdExhaustionError: if every attempt collided
        """
        for attempt in range(1, self._max_attempts + 1):
            candidate = self._token_factory().upper()
            if candidate not in self.entries:
                return candidate
            logger.debug(f"Id collision on {candidate} (attempt {attempt})")
        raise IdExhaustionError(
            f"Could not generate a unique movie ID after {self._max_attempts} attempts."
        )
