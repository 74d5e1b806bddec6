"""University API schemas."""

from typing import Any

from pydantic import BaseModel, Field

from app.schemas.common import CamelModel, DocumentBody


class TradeBody(CamelModel):
    name: str
    fees: Any = None


class CourseBody(DocumentBody):
    """A course with its trades; unknown keys are kept."""

    name: str
    trades: list[TradeBody] | None = None


class UniversityWriteRequest(DocumentBody):
    """Body for creating or updating a university.

    All keys are optional here; create requires name and address, which the
    service checks so the error message matches the rest of the API.
    """

    name: str | None = None
    address: str | None = None
    location: str | None = None
    type: str | None = None
    rating: float | None = None
    about: str | None = None
    courses: list[CourseBody] | None = None


class UniversityListResponse(BaseModel):
    universities: list[dict[str, Any]]
    total: int = Field(..., description="Returned count, or all search matches when searching")
    limit: int
    offset: int
