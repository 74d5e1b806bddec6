"""Application DTOs (read-models passed between services, repositories and routes)."""

from app.application.dtos.application import ApplicationResult
from app.application.dtos.identity import NO_ROLES, Identity, ResolvedRoles
from app.application.dtos.lead import RegistrationResult, SubscriptionResult
from app.application.dtos.profile import ProfileResult
from app.application.dtos.role_grant import GlobalAdminGrant, UniversityAdminGrant
from app.application.dtos.university import UniversityFilters, UniversityResult

__all__ = [
    "ApplicationResult",
    "GlobalAdminGrant",
    "Identity",
    "NO_ROLES",
    "ProfileResult",
    "RegistrationResult",
    "ResolvedRoles",
    "SubscriptionResult",
    "UniversityAdminGrant",
    "UniversityFilters",
    "UniversityResult",
]
