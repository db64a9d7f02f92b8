"""Error taxonomy for catalog operations."""


class CatalogError(Exception):
    """Base class for user-facing catalog errors. `kind` tags the failure."""

    kind = "catalog_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    kind = "not_found"


class AmbiguousError(CatalogError):
    kind = "ambiguous"


class InvalidRatingError(CatalogError):
    kind = "invalid_rating"


class InvalidTitleError(CatalogError):
    kind = "invalid_title"


class InvalidQueryError(CatalogError):
    kind = "invalid_query"


class NoRatedEntriesError(CatalogError):
    kind = "no_rated_entries"


class SelectionCancelledError(CatalogError):
    kind = "selection_cancelled"


class IdExhaustionError(CatalogError):
    kind = "id_exhausted"


class CatalogFileError(ValueError):
    """The catalog file exists but can't be parsed."""
