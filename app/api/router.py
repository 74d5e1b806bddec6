"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.dependencies (no manual repo/service construction).
Mounted under /api by create_app(); /health is mounted at the root.
"""

from fastapi import APIRouter

from app.api.endpoints import (
    admin,
    applications,
    auth,
    newsletter,
    registrations,
    universities,
    users,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(
    universities.router, prefix="/universities", tags=["universities"]
)
api_router.include_router(
    applications.router, prefix="/applications", tags=["applications"]
)
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(
    registrations.router, prefix="/registrations", tags=["registrations"]
)
api_router.include_router(newsletter.router, prefix="/newsletter", tags=["newsletter"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
