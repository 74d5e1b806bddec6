"""Firebase Authentication ID token verification (google-auth, no firebase-admin).

Every call checks the token signature against Google's published
securetoken certificates; there is no local session cache.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import google.auth.exceptions
import google.auth.transport.requests
from google.oauth2 import id_token

from app.application.dtos.identity import Identity
from app.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)

_ISSUER_PREFIX = "https://securetoken.google.com/"


def identity_from_claims(claims: dict[str, Any]) -> Identity:
    """Build an Identity from decoded Firebase ID token claims."""
    uid = claims.get("sub") or claims.get("user_id")
    if not uid:
        raise AuthenticationException("Invalid or expired token. Please login again.")
    return Identity(
        uid=uid,
        email=claims.get("email"),
        email_verified=bool(claims.get("email_verified", False)),
        name=claims.get("name"),
        picture=claims.get("picture"),
    )


class FirebaseTokenVerifier:
    """Verify Firebase ID tokens for one project (audience + issuer + signature + expiry)."""

    def __init__(self, project_id: str | None) -> None:
        self._project_id = project_id
        self._request = google.auth.transport.requests.Request()

    def _verify_sync(self, token: str) -> dict[str, Any]:
        claims = id_token.verify_firebase_token(
            token, self._request, audience=self._project_id
        )
        if claims.get("iss") != f"{_ISSUER_PREFIX}{self._project_id}":
            raise ValueError("Token issuer does not match Firebase project")
        return claims

    async def verify(self, token: str) -> Identity:
        """Return the trusted identity for token or raise AuthenticationException."""
        if not self._project_id:
            raise RuntimeError("Firebase project id is not configured")
        try:
            claims = await asyncio.to_thread(self._verify_sync, token)
        except google.auth.exceptions.TransportError:
            # Provider unreachable: not the caller's fault, surfaces as 500.
            raise
        except (ValueError, google.auth.exceptions.GoogleAuthError) as e:
            logger.info("Token verification failed: %s", e)
            raise AuthenticationException(
                "Invalid or expired token. Please login again."
            ) from None
        return identity_from_claims(claims)
