"""Presentation-layer dependency injection (composition root).

Routes depend only on these; repositories and services are built here from
the Firestore client and token verifier held on app.state. Tests replace
the repository and verifier getters through app.dependency_overrides.
"""

from .firestore import (
    get_application_repo,
    get_firestore,
    get_profile_repo,
    get_registration_repo,
    get_role_grant_repo,
    get_subscription_repo,
    get_university_repo,
)
from .identity import (
    CurrentIdentity,
    GlobalAdmin,
    get_caller_roles,
    get_current_identity,
    get_global_admin,
    get_identity_verifier,
    get_role_resolver,
)
from .services import (
    get_application_service,
    get_auth_service,
    get_newsletter_service,
    get_profile_service,
    get_registration_service,
    get_role_admin_service,
    get_university_service,
)

__all__ = [
    "CurrentIdentity",
    "GlobalAdmin",
    "get_application_repo",
    "get_application_service",
    "get_auth_service",
    "get_caller_roles",
    "get_current_identity",
    "get_firestore",
    "get_global_admin",
    "get_identity_verifier",
    "get_newsletter_service",
    "get_profile_repo",
    "get_profile_service",
    "get_registration_repo",
    "get_registration_service",
    "get_role_admin_service",
    "get_role_grant_repo",
    "get_role_resolver",
    "get_subscription_repo",
    "get_university_repo",
    "get_university_service",
]
