"""DTOs for public lead capture: registrations and newsletter subscriptions."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class RegistrationResult:
    """Lead registration submitted from the public site."""

    id: str
    full_name: str
    email: str
    mobile_number: Any
    city: str
    course_interested_in: str
    online_distance: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]) -> "RegistrationResult":
        return cls(
            id=doc_id,
            full_name=data.get("fullName") or "",
            email=data.get("email") or "",
            mobile_number=data.get("mobileNumber") or "",
            city=data.get("city") or "",
            course_interested_in=data.get("courseInterestedIn") or "",
            online_distance=bool(data.get("onlineDistance", False)),
            created_at=data.get("createdAt"),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "mobileNumber": self.mobile_number,
            "city": self.city,
            "courseInterestedIn": self.course_interested_in,
            "onlineDistance": self.online_distance,
            "createdAt": self.created_at,
        }

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.to_document()}


@dataclass(frozen=True)
class SubscriptionResult:
    """Newsletter subscription."""

    id: str
    email: str
    mobile_number: Any = None
    course: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]) -> "SubscriptionResult":
        return cls(
            id=doc_id,
            email=data.get("email") or "",
            mobile_number=data.get("mobileNumber"),
            course=data.get("course"),
            created_at=data.get("createdAt"),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "mobileNumber": self.mobile_number,
            "course": self.course,
            "createdAt": self.created_at,
        }

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.to_document()}
