"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from app.core.config import get_settings
from app.schemas.health import HealthResponse
from app.shared.utils.datetime import utc_now

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok status, environment name and server time."""
    return HealthResponse(environment=get_settings().environment, timestamp=utc_now())
