"""Health check API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    environment: str = Field(..., description="Deployment environment name")
    timestamp: datetime = Field(..., description="Server time (UTC)")
