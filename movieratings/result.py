"""Tagged result values returned by every service operation."""

from dataclasses import dataclass, field

from .errors import CatalogError


@dataclass(frozen=True)
class Success:
    payload: dict = field(default_factory=dict)
    ok = True

    @property
    def message(self) -> str:
        return self.payload.get("message", "")

    def to_dict(self) -> dict:
        return dict(self.payload)


@dataclass(frozen=True)
class Failure:
    error: CatalogError
    ok = False

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind}


Result = Success | Failure
