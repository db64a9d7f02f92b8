"""Text formatting for ratings and catalog listings."""

from .config import RATINGS_PREVIEW


def format_ratings(ratings: list[int], limit: int = RATINGS_PREVIEW) -> str:
    """Comma-separated ratings, collapsing anything past `limit`."""
    if not ratings:
        return "None"
    shown = ", ".join(str(r) for r in ratings[:limit])
    if len(ratings) > limit:
        shown += f"... (and {len(ratings) - limit} more)"
    return shown


def format_entry_line(entry: dict) -> str:
    """One listing line: 'ID: Title (Ratings: ...)'."""
    return f"{entry['id']}: {entry['title']} (Ratings: {format_ratings(entry['ratings'])})"
