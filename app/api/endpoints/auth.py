"""Auth API: exchange a Firebase ID token for profile + roles, and "who am I"."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from app.api.dependencies import CurrentIdentity, get_auth_service
from app.application.services import AuthService
from app.schemas.auth import RolesResponse, VerifyTokenRequest, VerifyTokenResponse

router = APIRouter()


@router.post("/verify", response_model=VerifyTokenResponse)
async def verify_token(
    body: VerifyTokenRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> VerifyTokenResponse:
    """Verify the token from the body (no bearer header needed)."""
    session = await auth_service.verify_token(body.token)
    return VerifyTokenResponse(
        user=session.user_dict(),
        roles=RolesResponse.model_validate(session.roles.to_dict()),
    )


@router.get("/me")
async def get_me(
    identity: CurrentIdentity,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> dict[str, Any]:
    """Stored profile plus roles; 404 until the profile has been created."""
    session = await auth_service.current_user(identity)
    return {**session.profile.to_dict(), "roles": session.roles.to_dict()}
