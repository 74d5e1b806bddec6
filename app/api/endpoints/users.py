"""Profile API: the caller's own profile (lazily created) and profile by id."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from app.api.dependencies import CurrentIdentity, get_profile_service
from app.application.services import ProfileService
from app.schemas.user import ProfileUpdateRequest

router = APIRouter()

Profiles = Annotated[ProfileService, Depends(get_profile_service)]


@router.get("/me")
async def get_my_profile(
    identity: CurrentIdentity,
    profile_service: Profiles,
) -> dict[str, Any]:
    """Return the caller's profile, creating it from the token on first call."""
    profile = await profile_service.get_current(identity)
    return profile.to_dict()


@router.get("/{user_id}")
async def get_profile(
    user_id: str,
    identity: CurrentIdentity,
    profile_service: Profiles,
) -> dict[str, Any]:
    """Owner or global admin."""
    profile = await profile_service.get(user_id, identity)
    return profile.to_dict()


@router.put("/{user_id}")
async def update_profile(
    user_id: str,
    body: ProfileUpdateRequest,
    identity: CurrentIdentity,
    profile_service: Profiles,
) -> dict[str, Any]:
    """Owner or global admin; id and createdAt in the body are ignored."""
    profile = await profile_service.update(user_id, body.to_document(), identity)
    return {**profile.to_dict(), "message": "Profile updated successfully."}
