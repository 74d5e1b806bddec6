"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.identity import Identity


class IIdentityVerifier(Protocol):
    """Protocol for bearer-token verification against the identity provider."""

    async def verify(self, token: str) -> Identity:
        """Return the trusted identity; raise AuthenticationException when rejected."""
