"""Firestore-backed lead repositories: registrations and newsletter subscriptions."""

from __future__ import annotations

from dataclasses import replace

from app.application.dtos.lead import RegistrationResult, SubscriptionResult
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import (
    COLLECTION_NEWSLETTER_SUBSCRIPTIONS,
    COLLECTION_REGISTRATIONS,
)
from app.shared.utils.generators import generate_cuid


class FirestoreRegistrationRepository:
    """Implements IRegistrationRepository over the registrations collection."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_REGISTRATIONS)

    async def create(self, registration: RegistrationResult) -> RegistrationResult:
        created = replace(registration, id=generate_cuid())
        await self._coll.create(created.id, created.to_document())
        return created

    async def list(self, skip: int = 0, limit: int = 100) -> list[RegistrationResult]:
        """Newest first, paginated server-side."""
        q = self._coll.order_by("createdAt", "DESCENDING").offset(skip).limit(limit)
        return [
            RegistrationResult.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]


class FirestoreSubscriptionRepository:
    """Implements ISubscriptionRepository over newsletter_subscriptions."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_NEWSLETTER_SUBSCRIPTIONS)

    async def create(self, subscription: SubscriptionResult) -> SubscriptionResult:
        created = replace(subscription, id=generate_cuid())
        await self._coll.create(created.id, created.to_document())
        return created

    async def list(self, skip: int = 0, limit: int = 100) -> list[SubscriptionResult]:
        q = self._coll.order_by("createdAt", "DESCENDING").offset(skip).limit(limit)
        return [
            SubscriptionResult.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]
