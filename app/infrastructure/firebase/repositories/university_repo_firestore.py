"""Firestore-backed university repository (implements IUniversityRepository)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.university import UniversityFilters, UniversityResult
from app.infrastructure.firebase._rest_client import FirestoreRESTClient, Query
from app.infrastructure.firebase.collections import COLLECTION_UNIVERSITIES
from app.shared.utils.generators import generate_cuid


class FirestoreUniversityRepository:
    """Universities in universities/{id}; IDs are generated CUIDs."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_UNIVERSITIES)

    def _filtered(self, filters: UniversityFilters) -> Query:
        """Equality filters on location/type and a range on rating, ANDed server-side."""
        q = self._coll.query()
        if filters.location:
            q = q.where("location", "==", filters.location)
        if filters.type:
            q = q.where("type", "==", filters.type)
        if filters.min_rating is not None:
            q = q.where("rating", ">=", filters.min_rating)
        if filters.max_rating is not None:
            q = q.where("rating", "<=", filters.max_rating)
        return q

    async def get_by_id(self, university_id: str) -> UniversityResult | None:
        """Return university by ID."""
        doc = await self._coll.document(university_id).get()
        if not doc:
            return None
        return UniversityResult.from_document(doc.id, doc.to_dict())

    async def list(
        self,
        filters: UniversityFilters,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[UniversityResult]:
        q = self._filtered(filters).offset(skip).limit(limit)
        return [
            UniversityResult.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]

    async def create(self, data: dict[str, Any]) -> UniversityResult:
        university_id = generate_cuid()
        await self._coll.create(university_id, data)
        return UniversityResult.from_document(university_id, data)

    async def update(
        self, university_id: str, fields: dict[str, Any]
    ) -> UniversityResult | None:
        doc = await self._coll.document(university_id).update(fields)
        if not doc:
            return None
        return UniversityResult.from_document(doc.id, doc.to_dict())

    async def delete(self, university_id: str) -> None:
        await self._coll.document(university_id).delete()
