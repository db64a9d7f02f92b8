"""Constants and paths for the movie ratings CLI."""

import os
import string
from dotenv import load_dotenv

load_dotenv()

CATALOG_PATH = os.getenv("MOVIE_CATALOG_PATH", "./data/MovieDB.json")
LOG_LEVEL = os.getenv("MOVIERATINGS_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Accepted rating range (inclusive)
MIN_RATING = 1
MAX_RATING = 5

# Movie ids: fixed-length tokens, stored upper-case
ID_LENGTH = 8
ID_ALPHABET = string.digits + string.ascii_uppercase
ID_MAX_ATTEMPTS = 10

# Minimum thefuzz score for a "did you mean" hint on a failed lookup
SUGGEST_THRESHOLD = 70

# How many ratings the menu shows before collapsing the rest
RATINGS_PREVIEW = 10


def is_valid_id(value) -> bool:
    """True if value looks like a movie id (case-insensitive)."""
    if not isinstance(value, str) or len(value) != ID_LENGTH or not value.isascii():
        return False
    return all(ch in ID_ALPHABET for ch in value.upper())
