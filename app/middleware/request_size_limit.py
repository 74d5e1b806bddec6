"""Request body size limit middleware.

Rejects requests whose body exceeds max_bytes (10 MB by default, see
settings.max_body_size). Enforces the limit for both Content-Length and
Transfer-Encoding: chunked.
Uses raw ASGI (no BaseHTTPMiddleware) so streaming responses pass through untouched.
"""

import json
from typing import Callable

from app.middleware._headers import get_header


async def _send_413(send: Callable, max_bytes: int) -> None:
    body = json.dumps(
        {
            "error": "Payload Too Large",
            "message": f"Request body must be at most {max_bytes} bytes.",
        }
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject oversize bodies with 413 (Content-Length up front, chunked while reading). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        content_length = get_header(scope, "content-length")
        if content_length is not None:
            try:
                too_large = int(content_length) > max_bytes
            except ValueError:
                too_large = False
            if too_large:
                await _send_413(send, max_bytes)
                return
            await app(scope, receive, send)
            return

        if (get_header(scope, "transfer-encoding") or "").lower() != "chunked":
            await app(scope, receive, send)
            return

        # Chunked: buffer up to the limit, then replay the body to the app.
        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            body = message.get("body", b"")
            total += len(body)
            if total > max_bytes:
                await _send_413(send, max_bytes)
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break

        replayed = False

        async def replay_receive() -> dict:
            nonlocal replayed
            if replayed:
                return await receive()
            replayed = True
            return {"type": "http.request", "body": b"".join(chunks), "more_body": False}

        await app(scope, replay_receive, send)

    return asgi_app
