"""DTOs for user profiles (users/{uid})."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Keys managed by the API; anything else in the document is a free-form attribute.
_CORE_KEYS = frozenset({"id", "email", "fullName", "createdAt", "updatedAt"})
# Keys a profile update must never overwrite.
IMMUTABLE_PROFILE_KEYS = frozenset({"id", "createdAt"})


@dataclass(frozen=True)
class ProfileResult:
    """Profile read-model; id equals the identity uid."""

    id: str
    email: str | None = None
    full_name: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]) -> "ProfileResult":
        return cls(
            id=doc_id,
            email=data.get("email"),
            full_name=data.get("fullName"),
            attributes={k: v for k, v in data.items() if k not in _CORE_KEYS},
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            **self.attributes,
            "id": self.id,
            "email": self.email,
            "fullName": self.full_name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def to_dict(self) -> dict[str, Any]:
        return self.to_document()
