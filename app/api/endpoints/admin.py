"""Role administration API (global admin only): grant, revoke and list both tiers."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import GlobalAdmin, get_role_admin_service
from app.application.services import RoleAdminService
from app.schemas.admin import (
    AdminListResponse,
    GrantAdminRequest,
    GrantUniversityAdminRequest,
    RoleChangeResponse,
    UniversityAdminListResponse,
)

router = APIRouter()

RoleAdmin = Annotated[RoleAdminService, Depends(get_role_admin_service)]


@router.post(
    "/roles/admin", response_model=RoleChangeResponse, response_model_exclude_none=True
)
async def grant_admin_role(
    body: GrantAdminRequest,
    admin: GlobalAdmin,
    role_admin_service: RoleAdmin,
) -> RoleChangeResponse:
    user_id = await role_admin_service.grant_global_admin(body.user_id, admin)
    return RoleChangeResponse(message="Admin role granted successfully.", user_id=user_id)


@router.delete(
    "/roles/admin/{user_id}",
    response_model=RoleChangeResponse,
    response_model_exclude_none=True,
)
async def revoke_admin_role(
    user_id: str,
    admin: GlobalAdmin,
    role_admin_service: RoleAdmin,
) -> RoleChangeResponse:
    """Revoke a global-admin grant; revoking your own is forbidden."""
    await role_admin_service.revoke_global_admin(user_id, admin)
    return RoleChangeResponse(message="Admin role revoked successfully.", user_id=user_id)


@router.get("/roles/admin", response_model=AdminListResponse)
async def list_admins(
    _admin: GlobalAdmin,
    role_admin_service: RoleAdmin,
) -> AdminListResponse:
    entries = await role_admin_service.list_global_admins()
    return AdminListResponse(admins=[e.to_dict() for e in entries])


@router.post("/roles/university", response_model=RoleChangeResponse)
async def grant_university_role(
    body: GrantUniversityAdminRequest,
    admin: GlobalAdmin,
    role_admin_service: RoleAdmin,
) -> RoleChangeResponse:
    """Assign a user to one university; replaces any earlier assignment."""
    grant = await role_admin_service.grant_university_admin(
        body.user_id, body.university_id, admin
    )
    return RoleChangeResponse(
        message="University admin role granted successfully.",
        user_id=grant.user_id,
        university_id=grant.university_id,
    )


@router.delete(
    "/roles/university/{user_id}",
    response_model=RoleChangeResponse,
    response_model_exclude_none=True,
)
async def revoke_university_role(
    user_id: str,
    admin: GlobalAdmin,
    role_admin_service: RoleAdmin,
) -> RoleChangeResponse:
    await role_admin_service.revoke_university_admin(user_id, admin)
    return RoleChangeResponse(
        message="University admin role revoked successfully.", user_id=user_id
    )


@router.get("/roles/university", response_model=UniversityAdminListResponse)
async def list_university_admins(
    _admin: GlobalAdmin,
    role_admin_service: RoleAdmin,
) -> UniversityAdminListResponse:
    entries = await role_admin_service.list_university_admins()
    return UniversityAdminListResponse(university_admins=[e.to_dict() for e in entries])
