"""Document store dependencies: the Firestore client on app.state and its repositories."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.domain.exceptions import StoreUnavailableException
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.repositories import (
    FirestoreApplicationRepository,
    FirestoreProfileRepository,
    FirestoreRegistrationRepository,
    FirestoreRoleGrantRepository,
    FirestoreSubscriptionRepository,
    FirestoreUniversityRepository,
)


def get_firestore(request: Request) -> FirestoreRESTClient:
    """Return the client built in the app lifespan; 500 when credentials were not configured."""
    client = getattr(request.app.state, "firestore", None)
    if client is None:
        raise StoreUnavailableException()
    return client


Firestore = Annotated[FirestoreRESTClient, Depends(get_firestore)]


def get_profile_repo(client: Firestore) -> FirestoreProfileRepository:
    return FirestoreProfileRepository(client)


def get_university_repo(client: Firestore) -> FirestoreUniversityRepository:
    return FirestoreUniversityRepository(client)


def get_application_repo(client: Firestore) -> FirestoreApplicationRepository:
    return FirestoreApplicationRepository(client)


def get_role_grant_repo(client: Firestore) -> FirestoreRoleGrantRepository:
    return FirestoreRoleGrantRepository(client)


def get_registration_repo(client: Firestore) -> FirestoreRegistrationRepository:
    return FirestoreRegistrationRepository(client)


def get_subscription_repo(client: Firestore) -> FirestoreSubscriptionRepository:
    return FirestoreSubscriptionRepository(client)
