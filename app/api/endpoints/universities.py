"""University API: public listing and reads, admin writes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import CurrentIdentity, GlobalAdmin, get_university_service
from app.application.dtos.university import UniversityFilters
from app.application.services import UniversityService
from app.core.config import get_settings
from app.schemas.common import MessageResponse
from app.schemas.university import UniversityListResponse, UniversityWriteRequest

router = APIRouter()

Universities = Annotated[UniversityService, Depends(get_university_service)]


@router.get("", response_model=UniversityListResponse)
async def list_universities(
    university_service: Universities,
    location: str | None = None,
    type: str | None = None,
    min_rating: Annotated[float | None, Query(alias="minRating")] = None,
    max_rating: Annotated[float | None, Query(alias="maxRating")] = None,
    search: str | None = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> UniversityListResponse:
    """List universities with optional filters and a name/address/about search."""
    limit = limit or get_settings().university_page_size
    page = await university_service.list(
        UniversityFilters(
            location=location or None,
            type=type or None,
            min_rating=min_rating,
            max_rating=max_rating,
        ),
        search=search,
        skip=offset,
        limit=limit,
    )
    return UniversityListResponse(
        universities=[u.to_dict() for u in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.skip,
    )


@router.get("/{university_id}")
async def get_university(
    university_id: str,
    university_service: Universities,
) -> dict[str, Any]:
    university = await university_service.get(university_id)
    return university.to_dict()


@router.post("", status_code=201)
async def create_university(
    body: UniversityWriteRequest,
    _admin: GlobalAdmin,
    university_service: Universities,
) -> dict[str, Any]:
    """Create a university (global admin). Requires name and address."""
    university = await university_service.create(body.to_document())
    return {**university.to_dict(), "message": "University created successfully."}


@router.put("/{university_id}")
async def update_university(
    university_id: str,
    body: UniversityWriteRequest,
    identity: CurrentIdentity,
    university_service: Universities,
) -> dict[str, Any]:
    """Update (global admin, or the university admin of this university)."""
    university = await university_service.update(
        university_id, body.to_document(), identity
    )
    return {**university.to_dict(), "message": "University updated successfully."}


@router.delete("/{university_id}", response_model=MessageResponse)
async def delete_university(
    university_id: str,
    _admin: GlobalAdmin,
    university_service: Universities,
) -> MessageResponse:
    await university_service.delete(university_id)
    return MessageResponse(message="University deleted successfully.")
