"""Application use cases: submission, lookup and the status workflow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.application.dtos.application import ApplicationResult
from app.application.dtos.identity import Identity
from app.application.interfaces.repositories import (
    IApplicationRepository,
    IUniversityRepository,
)
from app.application.services.access_control import require_university_access
from app.application.services.role_resolver import RoleResolver
from app.application.services.validation import optional_text, require_fields
from app.domain.enums import ApplicationStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.value_objects import resolve_trade_fees
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)

REQUIRED_APPLICATION_FIELDS = ["universityId", "courseName", "studentName", "email"]


@dataclass(frozen=True)
class UniversityApplications:
    """All applications to one university."""

    items: list[ApplicationResult]

    @property
    def total(self) -> int:
        return len(self.items)


def _not_found(application_id: str) -> ResourceNotFoundException:
    return ResourceNotFoundException(
        "Application", application_id, message="Application not found."
    )


class ApplicationService:
    """Applications live under their student's profile but are addressable by id."""

    def __init__(
        self,
        application_repo: IApplicationRepository,
        university_repo: IUniversityRepository,
        role_resolver: RoleResolver,
    ) -> None:
        self.application_repo = application_repo
        self.university_repo = university_repo
        self.role_resolver = role_resolver

    async def list_for_student(self, identity: Identity) -> list[ApplicationResult]:
        return await self.application_repo.list_for_student(identity.uid)

    async def get(self, application_id: str, identity: Identity) -> ApplicationResult:
        """Own application first; otherwise a global lookup for admins.

        A global admin may read any application, a university admin only those
        submitted to their university. Everyone else gets 404 so existence of
        other students' applications is not revealed.
        """
        own = await self.application_repo.get_for_student(identity.uid, application_id)
        if own is not None:
            return own
        roles = await self.role_resolver.resolve(identity.uid)
        if not (roles.is_global_admin or roles.is_university_admin):
            raise _not_found(application_id)
        application = await self.application_repo.find_by_id(application_id)
        if application is None:
            raise _not_found(application_id)
        require_university_access(
            roles,
            application.university_id,
            mismatch_message="You can only view applications for your university.",
        )
        return application

    async def submit(self, identity: Identity, data: dict[str, Any]) -> ApplicationResult:
        """Submit an application for the caller.

        Fees are copied from the university's course/trade list at this moment
        and never recomputed.
        """
        require_fields(
            data,
            REQUIRED_APPLICATION_FIELDS,
            "University ID, course name, student name, and email are required.",
        )
        university_id = data["universityId"]
        university = await self.university_repo.get_by_id(university_id)
        if university is None:
            raise ResourceNotFoundException(
                "University", university_id, message="University not found."
            )

        trade_name = optional_text(data.get("tradeName"))
        fees = resolve_trade_fees(university.courses, data["courseName"], trade_name)
        now = utc_now()
        application = ApplicationResult(
            id=generate_cuid(),
            student_id=identity.uid,
            student_name=data["studentName"],
            email=data["email"],
            phone=optional_text(data.get("phone")),
            city=optional_text(data.get("city")),
            message=optional_text(data.get("message")),
            university_id=university_id,
            university_name=optional_text(data.get("universityName")) or university.name,
            course_name=data["courseName"],
            trade_name=trade_name,
            fees=fees,
            status=ApplicationStatus.PENDING,
            submitted_at=now,
            updated_at=now,
        )
        created = await self.application_repo.create(application)
        logger.info(
            "Application %s submitted by %s to university %s",
            created.id,
            identity.uid,
            university_id,
        )
        return created

    async def set_status(
        self, application_id: str, status: Any, identity: Identity
    ) -> ApplicationResult:
        """Overwrite status and updatedAt.

        Any of the five values may follow any other; no history is kept and
        concurrent updates are last-writer-wins.
        """
        new_status = ApplicationStatus.parse(status)
        if new_status is None:
            raise ValidationException(
                f"Status must be one of: {', '.join(ApplicationStatus.values())}",
                field="status",
            )
        application = await self.application_repo.find_by_id(application_id)
        if application is None:
            raise _not_found(application_id)
        roles = await self.role_resolver.resolve(identity.uid)
        require_university_access(
            roles,
            application.university_id,
            mismatch_message="You can only update applications for your university.",
        )
        updated = await self.application_repo.update_status(
            application, new_status, utc_now()
        )
        if updated is None:
            raise _not_found(application_id)
        logger.info(
            "Application %s status set to %s by %s",
            application_id,
            new_status.value,
            identity.uid,
        )
        return updated

    async def list_for_university(
        self, university_id: str, identity: Identity
    ) -> UniversityApplications:
        roles = await self.role_resolver.resolve(identity.uid)
        require_university_access(
            roles,
            university_id,
            mismatch_message="You can only view applications for your university.",
        )
        items = await self.application_repo.list_for_university(university_id)
        return UniversityApplications(items=items)
