"""Rating validation and running aggregates."""

from decimal import Decimal, ROUND_HALF_UP

from .config import MIN_RATING, MAX_RATING
from .models import Entry

_ONE_PLACE = Decimal("0.1")


def is_valid_rating(value) -> bool:
    """True iff value is an integer rating within [MIN_RATING, MAX_RATING]."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_RATING <= value <= MAX_RATING


def round1(total: int, count: int) -> float:
    """total / count rounded half-up to one decimal place.

    Done in Decimal so 9/4 gives 2.3 and batch and incremental averages agree.
    """
    quotient = Decimal(total) / Decimal(count)
    return float(quotient.quantize(_ONE_PLACE, rounding=ROUND_HALF_UP))


def compute_average(ratings: list[int]) -> float:
    """Average of a rating list, 0.0 when empty."""
    if not ratings:
        return 0.0
    return round1(sum(ratings), len(ratings))


def record_rating(entry: Entry, value: int) -> None:
    """Append a validated rating and update the entry's aggregates in O(1).

    Callers validate first; an invalid value here is a programming error.
    """
    if not is_valid_rating(value):
        raise ValueError(f"record_rating called with invalid rating {value!r}")
    entry.ratings.append(value)
    entry.rating_count += 1
    entry.rating_sum += value
    entry.average_rating = round1(entry.rating_sum, entry.rating_count)


def reset_aggregates(entry: Entry) -> None:
    """Recompute count, sum and average from the entry's ratings list."""
    entry.rating_count = len(entry.ratings)
    entry.rating_sum = sum(entry.ratings)
    entry.average_rating = compute_average(entry.ratings)
