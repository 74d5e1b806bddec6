"""Auth use cases: exchange an ID token for profile + roles, and "who am I"."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.application.dtos.identity import Identity, ResolvedRoles
from app.application.dtos.profile import ProfileResult
from app.application.interfaces.repositories import IProfileRepository
from app.application.interfaces.services import IIdentityVerifier
from app.application.services.role_resolver import RoleResolver
from app.application.services.validation import is_missing
from app.domain.exceptions import ResourceNotFoundException, ValidationException


@dataclass(frozen=True)
class AuthSession:
    """Verified identity with its (optional) profile and resolved roles."""

    identity: Identity
    profile: ProfileResult | None
    roles: ResolvedRoles

    def user_dict(self) -> dict[str, Any]:
        """Token claims overlaid with the stored profile document, when there is one."""
        data = self.identity.to_dict()
        if self.profile is not None:
            data.update(self.profile.to_dict())
        return data


class AuthService:
    """Token exchange and current-user lookup."""

    def __init__(
        self,
        verifier: IIdentityVerifier,
        profile_repo: IProfileRepository,
        role_resolver: RoleResolver,
    ) -> None:
        self.verifier = verifier
        self.profile_repo = profile_repo
        self.role_resolver = role_resolver

    async def verify_token(self, token: str | None) -> AuthSession:
        """Verify token (400 when absent, 401 when rejected) and load profile + roles."""
        if is_missing(token):
            raise ValidationException("Token is required.", field="token")
        identity = await self.verifier.verify(token)
        profile = await self.profile_repo.get_by_id(identity.uid)
        roles = await self.role_resolver.resolve(identity.uid)
        return AuthSession(identity=identity, profile=profile, roles=roles)

    async def current_user(self, identity: Identity) -> AuthSession:
        """Profile + roles for an already-verified caller; 404 when no profile exists yet."""
        profile = await self.profile_repo.get_by_id(identity.uid)
        if profile is None:
            raise ResourceNotFoundException(
                "User profile", identity.uid, message="User profile not found."
            )
        roles = await self.role_resolver.resolve(identity.uid)
        return AuthSession(identity=identity, profile=profile, roles=roles)
