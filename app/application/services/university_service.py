"""University listing use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.application.dtos.identity import Identity
from app.application.dtos.university import (
    IMMUTABLE_UNIVERSITY_KEYS,
    UniversityFilters,
    UniversityResult,
)
from app.application.interfaces.repositories import IUniversityRepository
from app.application.services.access_control import require_university_access
from app.application.services.role_resolver import RoleResolver
from app.application.services.validation import is_missing, require_fields
from app.domain.exceptions import ResourceNotFoundException
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UniversityPage:
    """One page of universities; total counts every search match, not just this page."""

    items: list[UniversityResult]
    total: int
    skip: int
    limit: int


def _not_found(university_id: str) -> ResourceNotFoundException:
    return ResourceNotFoundException(
        "University", university_id, message="University not found."
    )


class UniversityService:
    """Create/read/update/delete universities with filtered, searchable listing."""

    def __init__(
        self,
        university_repo: IUniversityRepository,
        role_resolver: RoleResolver,
    ) -> None:
        self.university_repo = university_repo
        self.role_resolver = role_resolver

    async def list(
        self,
        filters: UniversityFilters,
        search: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> UniversityPage:
        """List universities.

        Filters run in the store. The free-text search cannot, so when a search
        term is given the whole filtered set is fetched, matched here, and only
        then paginated; otherwise pagination happens in the store.
        """
        if is_missing(search):
            items = await self.university_repo.list(filters, skip=skip, limit=limit)
            return UniversityPage(items=items, total=len(items), skip=skip, limit=limit)
        candidates = await self.university_repo.list(filters, skip=0, limit=None)
        matches = [u for u in candidates if u.matches_search(search)]
        return UniversityPage(
            items=matches[skip : skip + limit],
            total=len(matches),
            skip=skip,
            limit=limit,
        )

    async def get(self, university_id: str) -> UniversityResult:
        university = await self.university_repo.get_by_id(university_id)
        if university is None:
            raise _not_found(university_id)
        return university

    async def create(self, data: dict[str, Any]) -> UniversityResult:
        """Create from a free-form document; name and address are required."""
        require_fields(data, ["name", "address"], "Name and address are required.")
        now = utc_now()
        document = {k: v for k, v in data.items() if k != "id"}
        document["createdAt"] = now
        document["updatedAt"] = now
        created = await self.university_repo.create(document)
        logger.info("University created: %s", created.id)
        return created

    async def update(
        self, university_id: str, patch: dict[str, Any], identity: Identity
    ) -> UniversityResult:
        """Global admin, or the university admin of this university, may update it."""
        if await self.university_repo.get_by_id(university_id) is None:
            raise _not_found(university_id)
        roles = await self.role_resolver.resolve(identity.uid)
        require_university_access(
            roles,
            university_id,
            mismatch_message="You can only update your own university.",
        )
        fields = {k: v for k, v in patch.items() if k not in IMMUTABLE_UNIVERSITY_KEYS}
        fields["updatedAt"] = utc_now()
        updated = await self.university_repo.update(university_id, fields)
        if updated is None:
            raise _not_found(university_id)
        return updated

    async def delete(self, university_id: str) -> None:
        """Delete; applications that reference it are left untouched."""
        if await self.university_repo.get_by_id(university_id) is None:
            raise _not_found(university_id)
        await self.university_repo.delete(university_id)
        logger.info("University deleted: %s", university_id)
