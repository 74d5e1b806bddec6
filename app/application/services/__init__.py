"""Application services: role resolution, access guards and record use cases."""

from app.application.services.application_service import (
    ApplicationService,
    UniversityApplications,
)
from app.application.services.auth_service import AuthService, AuthSession
from app.application.services.lead_service import NewsletterService, RegistrationService
from app.application.services.profile_service import ProfileService
from app.application.services.role_admin_service import (
    GlobalAdminEntry,
    RoleAdminService,
    UniversityAdminEntry,
)
from app.application.services.role_resolver import RoleResolver
from app.application.services.university_service import UniversityPage, UniversityService

__all__ = [
    "ApplicationService",
    "AuthService",
    "AuthSession",
    "GlobalAdminEntry",
    "NewsletterService",
    "ProfileService",
    "RegistrationService",
    "RoleAdminService",
    "RoleResolver",
    "UniversityAdminEntry",
    "UniversityApplications",
    "UniversityPage",
    "UniversityService",
]
