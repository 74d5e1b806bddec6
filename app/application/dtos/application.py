"""DTOs for student applications (users/{uid}/applications/{id})."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from app.domain.enums import ApplicationStatus


@dataclass(frozen=True)
class ApplicationResult:
    """Application read-model. student_id is the owning profile id."""

    id: str
    student_id: str
    student_name: str
    email: str
    university_id: str
    university_name: str | None
    course_name: str
    trade_name: str | None = None
    phone: Any = None
    city: str | None = None
    message: str | None = None
    fees: Any = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    submitted_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]) -> "ApplicationResult":
        # Unknown stored status values read as Pending rather than failing the whole list.
        status = ApplicationStatus.parse(data.get("status")) or ApplicationStatus.PENDING
        return cls(
            id=data.get("id") or doc_id,
            student_id=data.get("studentId") or "",
            student_name=data.get("studentName") or "",
            email=data.get("email") or "",
            university_id=data.get("universityId") or "",
            university_name=data.get("universityName"),
            course_name=data.get("courseName") or "",
            trade_name=data.get("tradeName"),
            phone=data.get("phone"),
            city=data.get("city"),
            message=data.get("message"),
            fees=data.get("fees"),
            status=status,
            submitted_at=data.get("submittedAt"),
            updated_at=data.get("updatedAt"),
        )

    def with_status(
        self, status: ApplicationStatus, updated_at: datetime
    ) -> "ApplicationResult":
        return replace(self, status=status, updated_at=updated_at)

    def to_document(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "email": self.email,
            "phone": self.phone,
            "city": self.city,
            "message": self.message,
            "universityId": self.university_id,
            "universityName": self.university_name,
            "courseName": self.course_name,
            "tradeName": self.trade_name,
            "fees": self.fees,
            "status": self.status.value,
            "submittedAt": self.submitted_at,
            "updatedAt": self.updated_at,
        }

    def to_dict(self) -> dict[str, Any]:
        return self.to_document()
