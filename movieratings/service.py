"""Catalog operations: ratings, lookups, add/delete, with tagged results."""

import logging
from typing import Callable

from .config import MIN_RATING, MAX_RATING
from .display import format_ratings
from .errors import (
    CatalogError,
    InvalidQueryError,
    InvalidRatingError,
    InvalidTitleError,
    NoRatedEntriesError,
    NotFoundError,
    SelectionCancelledError,
)
from .matching import resolve, suggest
from .models import Entry
from .ratings import is_valid_rating, record_rating
from .result import Failure, Result, Success
from .selection import HeadlessSelection, SelectionStrategy
from .store import CatalogStore

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Public operations over a CatalogStore.

    Every operation takes `headless`. Headless calls never prompt or echo, and
    treat several matches as an error. Otherwise messages go to `echo` and
    ambiguity is handed to the injected selection strategy. The data change is
    the same either way; only prompting and output differ.
    """

    def __init__(self, store: CatalogStore, selection: SelectionStrategy | None = None,
                 echo: Callable[[str], None] = print):
        self.store = store
        self.selection = selection or HeadlessSelection()
        self.echo = echo
        self._headless_selection = HeadlessSelection()

    # -- public operations --

    def add_rating(self, query: str, value, headless: bool = False) -> Result:
        """Add one rating to the movie matching `query`."""
        return self._run(self._add_rating, headless, query, value)

    def add_entry(self, title: str, headless: bool = False) -> Result:
        """Create a movie with no ratings and a fresh id."""
        return self._run(self._add_entry, headless, title)

    def delete_entry(self, query: str, headless: bool = False) -> Result:
        return self._run(self._delete_entry, headless, query)

    def get_average(self, query: str, headless: bool = False) -> Result:
        return self._run(self._get_average, headless, query)

    def get_all_ratings(self, query: str, headless: bool = False) -> Result:
        """Full rating history of one movie; never truncated."""
        return self._run(self._get_all_ratings, headless, query)

    def get_top_rated(self, headless: bool = False) -> Result:
        """Highest average among rated movies; the first one wins a tie."""
        return self._run(self._get_top_rated, headless)

    def list_all(self, headless: bool = False) -> Result:
        return self._run(self._list_all, headless)

    # -- implementations (raise CatalogError, return payload dicts) --

    def _add_rating(self, query, value, headless: bool) -> dict:
        entry = self._resolve_one(query, headless, "add a rating for")
        if not is_valid_rating(value):
            raise InvalidRatingError(f"Rating must be between {MIN_RATING} and {MAX_RATING}.")
        record_rating(entry, value)
        logger.info(f"Recorded rating {value} for {entry.id} (count={entry.rating_count})")
        return {
            "message": f"Rating '{value}' added to '{entry.title}'",
            "entry": entry.snapshot(),
        }

    def _add_entry(self, title, headless: bool) -> dict:
        title = (title or "").strip()
        if not title:
            raise InvalidTitleError("Movie title cannot be empty.")
        new_id = self.store.generate_id()
        self.store.put(Entry(id=new_id, title=title))
        logger.info(f"Created movie {new_id} - '{title}'")
        return {"message": f"Movie '{title}' added with ID {new_id}.", "id": new_id}

    def _delete_entry(self, query, headless: bool) -> dict:
        entry = self._resolve_one(query, headless, "delete")
        self.store.delete(entry.id)
        logger.info(f"Deleted movie {entry.id}")
        return {
            "message": f"Movie {entry.label()} deleted successfully.",
            "id": entry.id,
            "title": entry.title,
        }

    def _get_average(self, query, headless: bool) -> dict:
        entry = self._resolve_one(query, headless, "get the average rating for")
        return {
            "message": (f"Average rating for '{entry.title}' is {entry.average_rating} "
                        f"based on {entry.rating_count} ratings."),
            "id": entry.id,
            "title": entry.title,
            "average_rating": entry.average_rating,
            "rating_count": entry.rating_count,
        }

    def _get_all_ratings(self, query, headless: bool) -> dict:
        entry = self._resolve_one(query, headless, "view ratings for")
        return {
            "message": f"Ratings for '{entry.title}': {format_ratings(entry.ratings)}",
            "id": entry.id,
            "title": entry.title,
            "ratings": list(entry.ratings),
        }

    def _get_top_rated(self, headless: bool) -> dict:
        top = None
        for entry in self.store.all():
            if entry.rating_count == 0:
                continue
            if top is None or entry.average_rating > top.average_rating:
                top = entry
        if top is None:
            raise NoRatedEntriesError("No movies have ratings yet.")
        return {
            "message": (f"Top rated movie is '{top.title}' with an average rating of "
                        f"{top.average_rating} based on {top.rating_count} ratings."),
            "id": top.id,
            "title": top.title,
            "average_rating": top.average_rating,
            "rating_count": top.rating_count,
        }

    def _list_all(self, headless: bool) -> dict:
        entries = [
            {"id": e.id, "title": e.title, "ratings": list(e.ratings)}
            for e in self.store.all()
        ]
        return {"message": f"{len(entries)} movie(s) in catalog.", "entries": entries}

    # -- helpers --

    def _resolve_one(self, query, headless: bool, action: str) -> Entry:
        """Narrow a partial id/title to exactly one live entry."""
        query = "" if query is None else str(query).strip()
        if not query:
            raise InvalidQueryError("Please enter part of a movie ID or title.")

        found = resolve(query, self.store.all())
        if not found:
            message = f"No matches found for '{query}'."
            hint = suggest(query, self.store.all())
            if hint:
                message += f" Did you mean '{hint.title}'?"
            raise NotFoundError(message)

        if len(found) == 1:
            chosen = found[0]
        else:
            strategy = self._headless_selection if headless else self.selection
            chosen = strategy.choose_one(found, query, action)
            if chosen is None:
                raise SelectionCancelledError("Invalid selection. No changes were made.")

        entry = self.store.get(chosen.id)
        if entry is None:
            raise NotFoundError(f"Movie with ID {chosen.id} not found.")
        return entry

    def _run(self, op, headless: bool, *args) -> Result:
        try:
            result = Success(op(*args, headless=headless))
        except CatalogError as e:
            logger.debug(f"{op.__name__.lstrip('_')} failed: [{e.kind}] {e.message}")
            result = Failure(e)

        if not headless:
            marker = "+" if result.ok else "x"
            self.echo(f"  {marker} {result.message}")
        return result
