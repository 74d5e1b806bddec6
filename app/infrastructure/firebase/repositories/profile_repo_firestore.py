"""Firestore-backed profile repository (implements IProfileRepository)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.profile import ProfileResult
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_USERS


class FirestoreProfileRepository:
    """Profiles in users/{uid}; the document ID is the identity uid."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_USERS)

    async def get_by_id(self, user_id: str) -> ProfileResult | None:
        """Return profile by uid."""
        doc = await self._coll.document(user_id).get()
        if not doc:
            return None
        return ProfileResult.from_document(doc.id, doc.to_dict())

    async def create(self, profile: ProfileResult) -> ProfileResult:
        await self._coll.document(profile.id).set(profile.to_document())
        return profile

    async def update(self, user_id: str, fields: dict[str, Any]) -> ProfileResult | None:
        """Merge fields; returns None when the profile does not exist."""
        doc = await self._coll.document(user_id).update(fields)
        if not doc:
            return None
        return ProfileResult.from_document(doc.id, doc.to_dict())
