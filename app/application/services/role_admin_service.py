"""Grant management for the two role tiers. Every caller here is already a global admin."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.application.dtos.identity import Identity
from app.application.dtos.role_grant import GlobalAdminGrant, UniversityAdminGrant
from app.application.interfaces.repositories import (
    IProfileRepository,
    IRoleGrantRepository,
    IUniversityRepository,
)
from app.application.services.validation import is_missing
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlobalAdminEntry:
    """Listing row: grant record plus the grantee's profile document (None if gone)."""

    grant: GlobalAdminGrant
    user_data: dict[str, Any] | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.grant.user_id,
            "roleData": self.grant.to_document(),
            "userData": self.user_data,
        }


@dataclass(frozen=True)
class UniversityAdminEntry:
    grant: UniversityAdminGrant
    user_data: dict[str, Any] | None
    university_data: dict[str, Any] | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.grant.user_id,
            "roleData": self.grant.to_document(),
            "userData": self.user_data,
            "universityData": self.university_data,
        }


class RoleAdminService:
    """Grant, revoke and list global and university admins."""

    def __init__(
        self,
        grant_repo: IRoleGrantRepository,
        profile_repo: IProfileRepository,
        university_repo: IUniversityRepository,
    ) -> None:
        self.grant_repo = grant_repo
        self.profile_repo = profile_repo
        self.university_repo = university_repo

    async def _require_profile(self, user_id: str) -> None:
        if await self.profile_repo.get_by_id(user_id) is None:
            raise ResourceNotFoundException("User", user_id, message="User not found.")

    async def grant_global_admin(self, user_id: str | None, caller: Identity) -> str:
        if is_missing(user_id):
            raise ValidationException("User ID is required.", field="userId")
        await self._require_profile(user_id)
        await self.grant_repo.set_global_admin(
            GlobalAdminGrant(user_id=user_id, granted_at=utc_now(), granted_by=caller.uid)
        )
        logger.info("Global admin granted to %s by %s", user_id, caller.uid)
        return user_id

    async def revoke_global_admin(self, user_id: str, caller: Identity) -> str:
        """Remove a global-admin grant. Admins can never revoke their own grant."""
        if user_id == caller.uid:
            raise AuthorizationException("You cannot revoke your own admin role.")
        if await self.grant_repo.get_global_admin(user_id) is None:
            raise ResourceNotFoundException(
                "Admin role", user_id, message="User does not have admin role."
            )
        await self.grant_repo.delete_global_admin(user_id)
        logger.info("Global admin revoked from %s by %s", user_id, caller.uid)
        return user_id

    async def list_global_admins(self) -> list[GlobalAdminEntry]:
        entries = []
        for grant in await self.grant_repo.list_global_admins():
            profile = await self.profile_repo.get_by_id(grant.user_id)
            entries.append(
                GlobalAdminEntry(
                    grant=grant,
                    user_data=profile.to_document() if profile else None,
                )
            )
        return entries

    async def grant_university_admin(
        self, user_id: str | None, university_id: str | None, caller: Identity
    ) -> UniversityAdminGrant:
        """Assign user_id to one university, replacing any previous assignment."""
        if is_missing(user_id) or is_missing(university_id):
            raise ValidationException("User ID and University ID are required.")
        await self._require_profile(user_id)
        if await self.university_repo.get_by_id(university_id) is None:
            raise ResourceNotFoundException(
                "University", university_id, message="University not found."
            )
        grant = UniversityAdminGrant(
            user_id=user_id,
            university_id=university_id,
            granted_at=utc_now(),
            granted_by=caller.uid,
        )
        await self.grant_repo.set_university_admin(grant)
        logger.info(
            "University admin for %s granted to %s by %s",
            university_id,
            user_id,
            caller.uid,
        )
        return grant

    async def revoke_university_admin(self, user_id: str, caller: Identity) -> str:
        if await self.grant_repo.get_university_admin(user_id) is None:
            raise ResourceNotFoundException(
                "University admin role",
                user_id,
                message="User does not have university admin role.",
            )
        await self.grant_repo.delete_university_admin(user_id)
        logger.info("University admin revoked from %s by %s", user_id, caller.uid)
        return user_id

    async def list_university_admins(self) -> list[UniversityAdminEntry]:
        entries = []
        for grant in await self.grant_repo.list_university_admins():
            profile = await self.profile_repo.get_by_id(grant.user_id)
            university = (
                await self.university_repo.get_by_id(grant.university_id)
                if grant.university_id
                else None
            )
            entries.append(
                UniversityAdminEntry(
                    grant=grant,
                    user_data=profile.to_document() if profile else None,
                    university_data=university.to_dict() if university else None,
                )
            )
        return entries
