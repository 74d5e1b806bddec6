"""Profile use cases: lazy creation, read and update (owner or global admin)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.identity import Identity
from app.application.dtos.profile import IMMUTABLE_PROFILE_KEYS, ProfileResult
from app.application.interfaces.repositories import IProfileRepository
from app.application.services.access_control import require_owner_or_global_admin
from app.application.services.role_resolver import RoleResolver
from app.domain.exceptions import ResourceNotFoundException
from app.shared.utils.datetime import utc_now


class ProfileService:
    """Profiles are keyed by identity uid and never change id."""

    def __init__(
        self,
        profile_repo: IProfileRepository,
        role_resolver: RoleResolver,
    ) -> None:
        self.profile_repo = profile_repo
        self.role_resolver = role_resolver

    async def get_current(self, identity: Identity) -> ProfileResult:
        """Return the caller's profile, creating it from token claims on first fetch."""
        existing = await self.profile_repo.get_by_id(identity.uid)
        if existing is not None:
            return existing
        now = utc_now()
        profile = ProfileResult(
            id=identity.uid,
            email=identity.email,
            full_name=identity.name or "",
            created_at=now,
            updated_at=now,
        )
        return await self.profile_repo.create(profile)

    async def _authorize(self, identity: Identity, user_id: str, message: str) -> None:
        # Owners never need a role lookup.
        if identity.uid == user_id:
            return
        roles = await self.role_resolver.resolve(identity.uid)
        require_owner_or_global_admin(identity, roles, user_id, message)

    async def get(self, user_id: str, identity: Identity) -> ProfileResult:
        await self._authorize(identity, user_id, "You can only view your own profile.")
        profile = await self.profile_repo.get_by_id(user_id)
        if profile is None:
            raise ResourceNotFoundException("User", user_id, message="User not found.")
        return profile

    async def update(
        self, user_id: str, patch: dict[str, Any], identity: Identity
    ) -> ProfileResult:
        """Merge patch into the profile; id and createdAt are ignored, updatedAt is set."""
        await self._authorize(identity, user_id, "You can only update your own profile.")
        fields = {k: v for k, v in patch.items() if k not in IMMUTABLE_PROFILE_KEYS}
        fields["updatedAt"] = utc_now()
        updated = await self.profile_repo.update(user_id, fields)
        if updated is None:
            raise ResourceNotFoundException("User", user_id, message="User not found.")
        return updated
