"""Rate limiter for SlowAPI.

One application-wide per-IP ceiling (settings.rate_limit) applied to every
route through SlowAPIMiddleware. The limiter is built per app in create_app()
so tests can change the limit through env without import-order tricks.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.core.config import Settings

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


def create_limiter(settings: Settings) -> Limiter:
    """Limiter keyed by client IP with the configured application-wide limit."""
    return Limiter(
        key_func=get_remote_address,
        application_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 in the API's error shape.

    Sync on purpose: SlowAPIMiddleware calls the registered handler without awaiting.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Too Many Requests", "message": RATE_LIMIT_MESSAGE},
    )
