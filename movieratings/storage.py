"""Load and save the catalog as a JSON file."""

import json
import logging
import os

from .config import is_valid_id
from .errors import CatalogFileError
from .models import Entry
from .ratings import is_valid_rating, reset_aggregates
from .store import CatalogStore

logger = logging.getLogger(__name__)


def ingest_record(record: dict, store: CatalogStore) -> Entry | None:
    """Validate one stored record and add it to the store.

    Bad or duplicate ids are replaced, invalid ratings are dropped, and the
    aggregates are recomputed from what's left. Returns None if the record
    has no usable title.
    """
    title = record.get("title")
    if not isinstance(title, str) or not title.strip():
        logger.warning(f"Skipping record without a title: {record!r}")
        return None

    movie_id = record.get("id")
    if not is_valid_id(movie_id):
        new_id = store.generate_id()
        logger.warning(f"Movie '{title}' had invalid ID {movie_id!r}, assigned {new_id}")
        movie_id = new_id
    elif movie_id in store:
        new_id = store.generate_id()
        logger.warning(f"Duplicate ID {movie_id} for '{title}', assigned {new_id}")
        movie_id = new_id

    raw = record.get("ratings", [])
    if not isinstance(raw, list):
        logger.warning(f"Ratings for '{title}' are not a list, ignoring them")
        raw = []
    valid = [r for r in raw if is_valid_rating(r)]
    invalid = [r for r in raw if not is_valid_rating(r)]
    if invalid:
        logger.warning(
            f"Invalid ratings removed for movie '{title}' (ID: {movie_id.upper()}): "
            + ", ".join(repr(r) for r in invalid)
        )

    entry = Entry.from_dict({**record, "id": movie_id.upper(), "title": title, "ratings": valid})
    reset_aggregates(entry)
    store.put(entry)
    return entry


def load_catalog(path: str, store: CatalogStore | None = None) -> CatalogStore:
    """Read a catalog file into a store. A missing file gives an empty catalog.

    Raises:
        CatalogFileError: if the file isn't valid JSON or has the wrong shape
    """
    if store is None:
        store = CatalogStore()

    if not os.path.exists(path):
        logger.info(f"No catalog found at {path}, starting with an empty movie list")
        return store

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogFileError(f"Catalog file {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise CatalogFileError(f"Catalog file {path} could not be read: {e}") from e

    if isinstance(data, dict):
        data = data.get("movies")
    if not isinstance(data, list):
        raise CatalogFileError(f"Catalog file {path} must contain a list of movies")

    for record in data:
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed record: {record!r}")
            continue
        ingest_record(record, store)

    logger.info(f"Loaded {len(store)} movies from {path}")
    return store


def save_catalog(store: CatalogStore, path: str) -> None:
    """Write every entry to `path`, replacing the previous file."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([entry.to_record() for entry in store.all()], f, indent=2)
    logger.info(f"Saved {len(store)} movies to {path}")
