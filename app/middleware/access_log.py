"""Access log middleware (development only).

Logs ``METHOD path status duration`` once per request. Registered by
create_app() only outside production.
Uses raw ASGI (no BaseHTTPMiddleware) so streaming responses pass through untouched.
"""

import time
from typing import Callable

from app.shared.telemetry.logging import get_logger

logger = get_logger("app.access")


def AccessLogMiddleware(app: Callable) -> Callable:
    """Log each HTTP request after its response has started. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s %s %.1fms",
                scope.get("method"),
                scope.get("path"),
                status_code,
                duration_ms,
            )

    return asgi_app
