"""Application service dependencies, built from the repository dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

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

from .firestore import (
    get_application_repo,
    get_profile_repo,
    get_registration_repo,
    get_role_grant_repo,
    get_subscription_repo,
    get_university_repo,
)
from .identity import get_identity_verifier, get_role_resolver


def get_auth_service(
    verifier: Annotated[IIdentityVerifier, Depends(get_identity_verifier)],
    profile_repo: Annotated[IProfileRepository, Depends(get_profile_repo)],
    role_resolver: Annotated[RoleResolver, Depends(get_role_resolver)],
) -> AuthService:
    return AuthService(verifier, profile_repo, role_resolver)


def get_profile_service(
    profile_repo: Annotated[IProfileRepository, Depends(get_profile_repo)],
    role_resolver: Annotated[RoleResolver, Depends(get_role_resolver)],
) -> ProfileService:
    return ProfileService(profile_repo, role_resolver)


def get_university_service(
    university_repo: Annotated[IUniversityRepository, Depends(get_university_repo)],
    role_resolver: Annotated[RoleResolver, Depends(get_role_resolver)],
) -> UniversityService:
    return UniversityService(university_repo, role_resolver)


def get_application_service(
    application_repo: Annotated[IApplicationRepository, Depends(get_application_repo)],
    university_repo: Annotated[IUniversityRepository, Depends(get_university_repo)],
    role_resolver: Annotated[RoleResolver, Depends(get_role_resolver)],
) -> ApplicationService:
    return ApplicationService(application_repo, university_repo, role_resolver)


def get_registration_service(
    registration_repo: Annotated[
        IRegistrationRepository, Depends(get_registration_repo)
    ],
) -> RegistrationService:
    return RegistrationService(registration_repo)


def get_newsletter_service(
    subscription_repo: Annotated[
        ISubscriptionRepository, Depends(get_subscription_repo)
    ],
) -> NewsletterService:
    return NewsletterService(subscription_repo)


def get_role_admin_service(
    grant_repo: Annotated[IRoleGrantRepository, Depends(get_role_grant_repo)],
    profile_repo: Annotated[IProfileRepository, Depends(get_profile_repo)],
    university_repo: Annotated[IUniversityRepository, Depends(get_university_repo)],
) -> RoleAdminService:
    return RoleAdminService(grant_repo, profile_repo, university_repo)
