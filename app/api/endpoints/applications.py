"""Application API: student submissions and the admin status workflow."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import CurrentIdentity, get_application_service
from app.application.services import ApplicationService
from app.schemas.application import (
    ApplicationActionResponse,
    ApplicationCreateRequest,
    ApplicationListResponse,
    ApplicationResponse,
    StatusUpdateRequest,
    UniversityApplicationsResponse,
)

router = APIRouter()

Applications = Annotated[ApplicationService, Depends(get_application_service)]


@router.get("", response_model=ApplicationListResponse)
async def list_my_applications(
    identity: CurrentIdentity,
    application_service: Applications,
) -> ApplicationListResponse:
    """Caller's own applications, newest first."""
    items = await application_service.list_for_student(identity)
    return ApplicationListResponse(
        applications=[ApplicationResponse.from_result(a) for a in items]
    )


# Registered before "/{application_id}" so "university" is not read as an id.
@router.get(
    "/university/{university_id}", response_model=UniversityApplicationsResponse
)
async def list_university_applications(
    university_id: str,
    identity: CurrentIdentity,
    application_service: Applications,
) -> UniversityApplicationsResponse:
    """All applications to one university (global admin or its university admin)."""
    result = await application_service.list_for_university(university_id, identity)
    return UniversityApplicationsResponse(
        applications=[ApplicationResponse.from_result(a) for a in result.items],
        total=result.total,
    )


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str,
    identity: CurrentIdentity,
    application_service: Applications,
) -> ApplicationResponse:
    application = await application_service.get(application_id, identity)
    return ApplicationResponse.from_result(application)


@router.post("", response_model=ApplicationActionResponse, status_code=201)
async def submit_application(
    body: ApplicationCreateRequest,
    identity: CurrentIdentity,
    application_service: Applications,
) -> ApplicationActionResponse:
    """Submit an application; fees are resolved from the university's course list."""
    application = await application_service.submit(
        identity, body.model_dump(by_alias=True, exclude_none=True)
    )
    return ApplicationActionResponse.model_validate(
        {**application.to_dict(), "message": "Application submitted successfully."}
    )


@router.put("/{application_id}/status", response_model=ApplicationActionResponse)
async def update_application_status(
    application_id: str,
    body: StatusUpdateRequest,
    identity: CurrentIdentity,
    application_service: Applications,
) -> ApplicationActionResponse:
    """Set status (global admin, or the university admin of the application's university)."""
    application = await application_service.set_status(
        application_id, body.status, identity
    )
    return ApplicationActionResponse.model_validate(
        {
            **application.to_dict(),
            "message": "Application status updated successfully.",
        }
    )
