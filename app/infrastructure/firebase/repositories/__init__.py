"""Firestore-backed repository implementations of the application ports."""

from app.infrastructure.firebase.repositories.application_repo_firestore import (
    FirestoreApplicationRepository,
)
from app.infrastructure.firebase.repositories.lead_repo_firestore import (
    FirestoreRegistrationRepository,
    FirestoreSubscriptionRepository,
)
from app.infrastructure.firebase.repositories.profile_repo_firestore import (
    FirestoreProfileRepository,
)
from app.infrastructure.firebase.repositories.role_grant_repo_firestore import (
    FirestoreRoleGrantRepository,
)
from app.infrastructure.firebase.repositories.university_repo_firestore import (
    FirestoreUniversityRepository,
)

__all__ = [
    "FirestoreApplicationRepository",
    "FirestoreProfileRepository",
    "FirestoreRegistrationRepository",
    "FirestoreRoleGrantRepository",
    "FirestoreSubscriptionRepository",
    "FirestoreUniversityRepository",
]
