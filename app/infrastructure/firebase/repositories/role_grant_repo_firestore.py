"""Firestore-backed grant repository (implements IRoleGrantRepository)."""

from __future__ import annotations

from app.application.dtos.role_grant import GlobalAdminGrant, UniversityAdminGrant
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import (
    COLLECTION_ROLES_ADMIN,
    COLLECTION_ROLES_UNIVERSITY,
)


class FirestoreRoleGrantRepository:
    """Grant documents are keyed by uid, so each identity has at most one of each kind."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._admins = client.collection(COLLECTION_ROLES_ADMIN)
        self._university_admins = client.collection(COLLECTION_ROLES_UNIVERSITY)

    async def get_global_admin(self, user_id: str) -> GlobalAdminGrant | None:
        doc = await self._admins.document(user_id).get()
        if not doc:
            return None
        return GlobalAdminGrant.from_document(doc.id, doc.to_dict())

    async def set_global_admin(self, grant: GlobalAdminGrant) -> None:
        await self._admins.document(grant.user_id).set(grant.to_document())

    async def delete_global_admin(self, user_id: str) -> None:
        await self._admins.document(user_id).delete()

    async def list_global_admins(self) -> list[GlobalAdminGrant]:
        return [
            GlobalAdminGrant.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in self._admins.stream()
        ]

    async def get_university_admin(self, user_id: str) -> UniversityAdminGrant | None:
        doc = await self._university_admins.document(user_id).get()
        if not doc:
            return None
        return UniversityAdminGrant.from_document(doc.id, doc.to_dict())

    async def set_university_admin(self, grant: UniversityAdminGrant) -> None:
        """Overwrites any previous assignment for this user."""
        await self._university_admins.document(grant.user_id).set(grant.to_document())

    async def delete_university_admin(self, user_id: str) -> None:
        await self._university_admins.document(user_id).delete()

    async def list_university_admins(self) -> list[UniversityAdminGrant]:
        return [
            UniversityAdminGrant.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in self._university_admins.stream()
        ]
