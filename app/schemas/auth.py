"""Auth API schemas."""

from typing import Any

from app.schemas.common import CamelModel


class VerifyTokenRequest(CamelModel):
    """Request body for POST /auth/verify. Missing token is a 400 from the service."""

    token: str | None = None


class RolesResponse(CamelModel):
    """Caller's resolved roles (isAdmin = global admin)."""

    is_admin: bool = False
    is_university_admin: bool = False
    university_id: str | None = None


class VerifyTokenResponse(CamelModel):
    """Token claims overlaid with the stored profile, plus roles."""

    user: dict[str, Any]
    roles: RolesResponse
