"""Application API schemas."""

from datetime import datetime
from typing import Any

from app.application.dtos.application import ApplicationResult
from app.domain.enums import ApplicationStatus
from app.schemas.common import CamelModel


class ApplicationCreateRequest(CamelModel):
    """Body for POST /applications. Required keys are checked by the service."""

    university_id: str | None = None
    university_name: str | None = None
    course_name: str | None = None
    trade_name: str | None = None
    student_name: str | None = None
    email: str | None = None
    phone: Any = None
    city: str | None = None
    message: str | None = None


class StatusUpdateRequest(CamelModel):
    """Body for PUT /applications/{id}/status. Any string is accepted; unknown values are a 400."""

    status: Any = None


class ApplicationResponse(CamelModel):
    id: str
    student_id: str
    student_name: str
    email: str
    phone: Any = None
    city: str | None = None
    message: str | None = None
    university_id: str
    university_name: str | None = None
    course_name: str
    trade_name: str | None = None
    fees: Any = None
    status: ApplicationStatus
    submitted_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_result(cls, application: ApplicationResult) -> "ApplicationResponse":
        return cls.model_validate(application.to_dict())


class ApplicationActionResponse(ApplicationResponse):
    """Application echoed after a write.

    ``message`` carries the outcome text here, shadowing the applicant's own
    message field, which stays readable through GET.
    """

    message: str


class ApplicationListResponse(CamelModel):
    applications: list[ApplicationResponse]


class UniversityApplicationsResponse(CamelModel):
    applications: list[ApplicationResponse]
    total: int
