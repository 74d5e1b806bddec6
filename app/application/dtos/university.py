"""DTOs for university listings."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

_CORE_KEYS = frozenset(
    {
        "id",
        "name",
        "address",
        "location",
        "type",
        "rating",
        "about",
        "courses",
        "createdAt",
        "updatedAt",
    }
)
IMMUTABLE_UNIVERSITY_KEYS = frozenset({"id", "createdAt"})


@dataclass(frozen=True)
class UniversityFilters:
    """Server-side filters for listing universities (all optional, combined with AND)."""

    location: str | None = None
    type: str | None = None
    min_rating: float | None = None
    max_rating: float | None = None


@dataclass(frozen=True)
class UniversityResult:
    """University read-model. Unknown document keys are kept in extra."""

    id: str
    name: str | None = None
    address: str | None = None
    location: str | None = None
    type: str | None = None
    rating: float | None = None
    about: str | None = None
    courses: list[Any] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]) -> "UniversityResult":
        courses = data.get("courses")
        return cls(
            id=doc_id,
            name=data.get("name"),
            address=data.get("address"),
            location=data.get("location"),
            type=data.get("type"),
            rating=data.get("rating"),
            about=data.get("about"),
            courses=courses if isinstance(courses, list) else [],
            extra={k: v for k, v in data.items() if k not in _CORE_KEYS},
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def matches_search(self, term: str) -> bool:
        """Case-insensitive substring match on name, address or about."""
        needle = term.lower()
        return any(
            isinstance(value, str) and needle in value.lower()
            for value in (self.name, self.address, self.about)
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {**self.extra, "id": self.id}
        for key, value in (
            ("name", self.name),
            ("address", self.address),
            ("location", self.location),
            ("type", self.type),
            ("rating", self.rating),
            ("about", self.about),
        ):
            if value is not None:
                data[key] = value
        if self.courses:
            data["courses"] = self.courses
        data["createdAt"] = self.created_at
        data["updatedAt"] = self.updated_at
        return data
