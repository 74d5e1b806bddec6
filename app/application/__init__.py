"""Application layer: interfaces, DTOs and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (Firestore repositories, token verifier).
"""

from app.application.interfaces import (
    IApplicationRepository,
    IIdentityVerifier,
    IProfileRepository,
    IRegistrationRepository,
    IRoleGrantRepository,
    ISubscriptionRepository,
    IUniversityRepository,
)
from app.application.services import (
    ApplicationService,
    AuthService,
    NewsletterService,
    ProfileService,
    RegistrationService,
    RoleAdminService,
    RoleResolver,
    UniversityService,
)

__all__ = [
    "ApplicationService",
    "AuthService",
    "IApplicationRepository",
    "IIdentityVerifier",
    "IProfileRepository",
    "IRegistrationRepository",
    "IRoleGrantRepository",
    "ISubscriptionRepository",
    "IUniversityRepository",
    "NewsletterService",
    "ProfileService",
    "RegistrationService",
    "RoleAdminService",
    "RoleResolver",
    "UniversityService",
]
