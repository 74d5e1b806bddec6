"""Access-control guards.

Each guard is a pass/fail check over the trusted identity, the resolved
roles and (where relevant) the resource being touched. Guards raise domain
exceptions; callers run them in order and the first failure ends the
request. A global admin passes every university-scoped check.
"""

from __future__ import annotations

from app.application.dtos.identity import Identity, ResolvedRoles
from app.domain.exceptions import AuthenticationException, AuthorizationException

ADMIN_OR_UNIVERSITY_ADMIN_REQUIRED = "Admin or University Admin access required."


def require_authenticated(identity: Identity | None) -> Identity:
    if identity is None or not identity.uid:
        raise AuthenticationException("Authentication required.")
    return identity


def require_global_admin(roles: ResolvedRoles) -> None:
    if not roles.is_global_admin:
        raise AuthorizationException("Admin access required.")


def require_university_admin(roles: ResolvedRoles) -> str:
    """Pass for university admins and return the university they administer."""
    if not roles.is_university_admin or not roles.university_id:
        raise AuthorizationException("University admin access required.")
    return roles.university_id


def require_owner_or_global_admin(
    identity: Identity,
    roles: ResolvedRoles,
    owner_id: str,
    message: str = "You do not have permission to access this resource.",
) -> None:
    if roles.is_global_admin or identity.uid == owner_id:
        return
    raise AuthorizationException(message)


def require_university_access(
    roles: ResolvedRoles,
    university_id: str,
    mismatch_message: str = "You can only manage your own university.",
) -> None:
    """Global admin, or the university admin of university_id."""
    if roles.is_global_admin:
        return
    if roles.is_university_admin:
        if roles.administers(university_id):
            return
        raise AuthorizationException(mismatch_message)
    raise AuthorizationException(ADMIN_OR_UNIVERSITY_ADMIN_REQUIRED)
