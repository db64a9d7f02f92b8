"""Movie entry data model."""

from dataclasses import dataclass, field


@dataclass
class Entry:
    """
    One movie in the catalog.

    `rating_count`, `rating_sum` and `average_rating` are kept in lockstep
    with `ratings` by the helpers in ratings.py; don't assign them directly.
    """
    id: str
    title: str
    ratings: list[int] = field(default_factory=list)
    rating_count: int = 0
    rating_sum: int = 0
    average_rating: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """Create Entry from a JSON record (catalog-file or to_dict keys). Aggregates are taken as-is."""
        return cls(
            id=data["id"],
            title=data["title"],
            ratings=list(data.get("ratings", [])),
            rating_count=data.get("totalRatings", data.get("rating_count", 0)),
            rating_sum=data.get("totalRatingSum", data.get("rating_sum", 0)),
            average_rating=data.get("averageRating", data.get("average_rating", 0.0)),
        )

    def to_record(self) -> dict:
        """Catalog-file record, keyed the way existing MovieDB.json files are."""
        return {
            "id": self.id,
            "title": self.title,
            "ratings": list(self.ratings),
            "totalRatings": self.rating_count,
            "totalRatingSum": self.rating_sum,
            "averageRating": self.average_rating,
        }

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "title": self.title,
            "ratings": list(self.ratings),
            "rating_count": self.rating_count,
            "rating_sum": self.rating_sum,
            "average_rating": self.average_rating,
        }

    def snapshot(self) -> dict:
        """Detached copy of the entry's current state."""
        return self.to_dict()

    def label(self) -> str:
        return f"'{self.title}' (ID: {self.id})"
