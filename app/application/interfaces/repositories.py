"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Document keys in ``fields`` dicts use the stored camelCase names.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.application import ApplicationResult
    from app.application.dtos.lead import RegistrationResult, SubscriptionResult
    from app.application.dtos.profile import ProfileResult
    from app.application.dtos.role_grant import GlobalAdminGrant, UniversityAdminGrant
    from app.application.dtos.university import UniversityFilters, UniversityResult
    from app.domain.enums import ApplicationStatus


class IProfileRepository(Protocol):
    """Protocol for profile repository (users collection)."""

    async def get_by_id(self, user_id: str) -> ProfileResult | None:
        """Return profile by uid."""

    async def create(self, profile: ProfileResult) -> ProfileResult:
        """Write a new profile document keyed by profile.id."""

    async def update(self, user_id: str, fields: dict[str, Any]) -> ProfileResult | None:
        """Merge fields into an existing profile; None when it does not exist."""


class IUniversityRepository(Protocol):
    """Protocol for university repository."""

    async def get_by_id(self, university_id: str) -> UniversityResult | None:
        """Return university by ID."""

    async def list(
        self,
        filters: UniversityFilters,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[UniversityResult]:
        """Return universities matching filters; limit None means no limit."""

    async def create(self, data: dict[str, Any]) -> UniversityResult:
        """Create a university with a generated ID."""

    async def update(
        self, university_id: str, fields: dict[str, Any]
    ) -> UniversityResult | None:
        """Merge fields into an existing university; None when it does not exist."""

    async def delete(self, university_id: str) -> None:
        """Delete university by ID."""


class IApplicationRepository(Protocol):
    """Protocol for applications (sub-collection under each profile)."""

    async def create(self, application: ApplicationResult) -> ApplicationResult:
        """Write a new application under users/{student_id}/applications."""

    async def get_for_student(
        self, student_id: str, application_id: str
    ) -> ApplicationResult | None:
        """Return the application from the student's own sub-collection."""

    async def find_by_id(self, application_id: str) -> ApplicationResult | None:
        """Return the application by ID across all students (collection group)."""

    async def list_for_student(self, student_id: str) -> list[ApplicationResult]:
        """Return the student's applications, newest first."""

    async def list_for_university(self, university_id: str) -> list[ApplicationResult]:
        """Return all applications to a university, newest first."""

    async def update_status(
        self,
        application: ApplicationResult,
        status: ApplicationStatus,
        updated_at: datetime,
    ) -> ApplicationResult | None:
        """Overwrite status and updatedAt; None when the document vanished."""


class IRoleGrantRepository(Protocol):
    """Protocol for the two grant collections (roles_admin, roles_university)."""

    async def get_global_admin(self, user_id: str) -> GlobalAdminGrant | None:
        """Return the global-admin grant for user_id, if any."""

    async def set_global_admin(self, grant: GlobalAdminGrant) -> None:
        """Create or overwrite the global-admin grant."""

    async def delete_global_admin(self, user_id: str) -> None:
        """Remove the global-admin grant."""

    async def list_global_admins(self) -> list[GlobalAdminGrant]:
        """Return every global-admin grant."""

    async def get_university_admin(self, user_id: str) -> UniversityAdminGrant | None:
        """Return the university-admin grant for user_id, if any."""

    async def set_university_admin(self, grant: UniversityAdminGrant) -> None:
        """Create or overwrite the university-admin grant (one per user)."""

    async def delete_university_admin(self, user_id: str) -> None:
        """Remove the university-admin grant."""

    async def list_university_admins(self) -> list[UniversityAdminGrant]:
        """Return every university-admin grant."""


class IRegistrationRepository(Protocol):
    """Protocol for lead registrations."""

    async def create(self, registration: RegistrationResult) -> RegistrationResult:
        """Create with a generated ID (registration.id is ignored)."""

    async def list(self, skip: int = 0, limit: int = 100) -> list[RegistrationResult]:
        """Return registrations, newest first."""


class ISubscriptionRepository(Protocol):
    """Protocol for newsletter subscriptions."""

    async def create(self, subscription: SubscriptionResult) -> SubscriptionResult:
        """Create with a generated ID (subscription.id is ignored)."""

    async def list(self, skip: int = 0, limit: int = 100) -> list[SubscriptionResult]:
        """Return subscriptions, newest first."""
