"""Role resolution: classify a caller from the two grant collections."""

from __future__ import annotations

from app.application.dtos.identity import ResolvedRoles
from app.application.interfaces.repositories import IRoleGrantRepository


class RoleResolver:
    """Resolve {global admin, university admin, university id} for a uid.

    Two independent point lookups; a missing grant record means "no", never
    an error. Nothing is cached, so a revoked grant takes effect on the next
    request.
    """

    def __init__(self, grant_repo: IRoleGrantRepository) -> None:
        self.grant_repo = grant_repo

    async def resolve(self, user_id: str) -> ResolvedRoles:
        admin_grant = await self.grant_repo.get_global_admin(user_id)
        university_grant = await self.grant_repo.get_university_admin(user_id)
        return ResolvedRoles(
            is_global_admin=admin_grant is not None,
            is_university_admin=university_grant is not None,
            university_id=university_grant.university_id if university_grant else None,
        )
