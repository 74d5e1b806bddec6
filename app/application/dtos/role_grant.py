"""DTOs for grant records (roles_admin/{uid}, roles_university/{uid})."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class GlobalAdminGrant:
    """Presence of this record makes user_id a global admin."""

    user_id: str
    granted_at: datetime | None = None
    granted_by: str | None = None

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]) -> "GlobalAdminGrant":
        return cls(
            user_id=doc_id,
            granted_at=data.get("grantedAt"),
            granted_by=data.get("grantedBy"),
        )

    def to_document(self) -> dict[str, Any]:
        return {"grantedAt": self.granted_at, "grantedBy": self.granted_by}


@dataclass(frozen=True)
class UniversityAdminGrant:
    """Makes user_id the admin of exactly one university."""

    user_id: str
    university_id: str
    granted_at: datetime | None = None
    granted_by: str | None = None

    @classmethod
    def from_document(
        cls, doc_id: str, data: dict[str, Any]
    ) -> "UniversityAdminGrant":
        return cls(
            user_id=doc_id,
            university_id=data.get("universityId", ""),
            granted_at=data.get("grantedAt"),
            granted_by=data.get("grantedBy"),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "universityId": self.university_id,
            "grantedAt": self.granted_at,
            "grantedBy": self.granted_by,
        }
