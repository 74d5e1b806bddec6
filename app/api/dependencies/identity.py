"""Bearer-token identity and role dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.identity import Identity, ResolvedRoles
from app.application.interfaces import IIdentityVerifier, IRoleGrantRepository
from app.application.services import RoleResolver
from app.application.services.access_control import require_global_admin
from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException
from app.infrastructure.firebase import FirebaseTokenVerifier

from .firestore import get_role_grant_repo

_http_bearer = HTTPBearer(auto_error=False)

NO_TOKEN_MESSAGE = (
    "No token provided. Please include Authorization header with Bearer token."
)


def get_identity_verifier(request: Request) -> IIdentityVerifier:
    """Verifier built in the app lifespan; built from settings if the lifespan did not run."""
    verifier = getattr(request.app.state, "token_verifier", None)
    if verifier is None:
        verifier = FirebaseTokenVerifier(get_settings().firebase_project_id)
        request.app.state.token_verifier = verifier
    return verifier


async def get_current_identity(
    verifier: Annotated[IIdentityVerifier, Depends(get_identity_verifier)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(_http_bearer)
    ],
) -> Identity:
    """Require ``Authorization: Bearer <token>`` and verify it; 401 otherwise."""
    if credentials is None or not credentials.credentials.strip():
        raise AuthenticationException(NO_TOKEN_MESSAGE)
    return await verifier.verify(credentials.credentials.strip())


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]


def get_role_resolver(
    grant_repo: Annotated[IRoleGrantRepository, Depends(get_role_grant_repo)],
) -> RoleResolver:
    return RoleResolver(grant_repo)


async def get_caller_roles(
    identity: CurrentIdentity,
    role_resolver: Annotated[RoleResolver, Depends(get_role_resolver)],
) -> ResolvedRoles:
    return await role_resolver.resolve(identity.uid)


async def get_global_admin(
    identity: CurrentIdentity,
    roles: Annotated[ResolvedRoles, Depends(get_caller_roles)],
) -> Identity:
    """Authenticated caller holding a global-admin grant; 403 otherwise."""
    require_global_admin(roles)
    return identity


GlobalAdmin = Annotated[Identity, Depends(get_global_admin)]
