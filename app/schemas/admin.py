"""Role-grant administration schemas."""

from typing import Any

from app.schemas.common import CamelModel


class GrantAdminRequest(CamelModel):
    user_id: str | None = None


class GrantUniversityAdminRequest(CamelModel):
    user_id: str | None = None
    university_id: str | None = None


class RoleChangeResponse(CamelModel):
    message: str
    user_id: str
    university_id: str | None = None


class AdminListResponse(CamelModel):
    """Each entry: userId, roleData (grant record), userData (profile or null)."""

    admins: list[dict[str, Any]]


class UniversityAdminListResponse(CamelModel):
    """Each entry also carries universityData (university or null)."""

    university_admins: list[dict[str, Any]]
