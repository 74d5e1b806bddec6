"""Registration API: public lead form and admin listing."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import GlobalAdmin, get_registration_service
from app.application.services import RegistrationService
from app.core.config import get_settings
from app.schemas.lead import (
    RegistrationCreatedResponse,
    RegistrationCreateRequest,
    RegistrationListResponse,
    RegistrationResponse,
)

router = APIRouter()

Registrations = Annotated[RegistrationService, Depends(get_registration_service)]


@router.post("", response_model=RegistrationCreatedResponse, status_code=201)
async def create_registration(
    body: RegistrationCreateRequest,
    registration_service: Registrations,
) -> RegistrationCreatedResponse:
    registration = await registration_service.create(
        body.model_dump(by_alias=True, exclude_none=True)
    )
    return RegistrationCreatedResponse.model_validate(
        {**registration.to_dict(), "message": "Registration submitted successfully."}
    )


@router.get("", response_model=RegistrationListResponse)
async def list_registrations(
    _admin: GlobalAdmin,
    registration_service: Registrations,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> RegistrationListResponse:
    """Newest first (global admin)."""
    limit = limit or get_settings().lead_page_size
    items = await registration_service.list(skip=offset, limit=limit)
    return RegistrationListResponse(
        registrations=[RegistrationResponse.model_validate(r.to_dict()) for r in items],
        total=len(items),
        limit=limit,
        offset=offset,
    )
