"""Firebase integration: Firestore REST client and ID token verification."""

from app.infrastructure.firebase.client import create_firestore_client
from app.infrastructure.firebase.token_verifier import FirebaseTokenVerifier

__all__ = [
    "FirebaseTokenVerifier",
    "create_firestore_client",
]
