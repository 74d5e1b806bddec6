"""Unit tests for the raw ASGI middlewares (driven without an HTTP client)."""

import json

from app.middleware import RequestSizeLimitMiddleware
from app.middleware.request_id import sanitize_request_id


def test_sanitize_keeps_safe_ids() -> None:
    assert sanitize_request_id("req_123-abc") == "req_123-abc"


def test_sanitize_replaces_unsafe_ids() -> None:
    for raw in [None, "", "has space", "new\nline", "x" * 65]:
        replaced = sanitize_request_id(raw)
        assert replaced != raw
        assert len(replaced) == 36


class _Inner:
    """ASGI app that reads the whole body and answers 200."""

    def __init__(self) -> None:
        self.body = b""

    async def __call__(self, scope, receive, send) -> None:
        while True:
            message = await receive()
            self.body += message.get("body", b"")
            if not message.get("more_body", False):
                break
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"ok"})


async def _run_chunked(chunks: list[bytes], max_bytes: int) -> tuple[list[dict], _Inner]:
    inner = _Inner()
    app = RequestSizeLimitMiddleware(inner, max_bytes=max_bytes)
    messages = [
        {"type": "http.request", "body": c, "more_body": i < len(chunks) - 1}
        for i, c in enumerate(chunks)
    ]
    sent: list[dict] = []

    async def receive() -> dict:
        return messages.pop(0)

    async def send(message: dict) -> None:
        sent.append(message)

    scope = {"type": "http", "headers": [(b"transfer-encoding", b"chunked")]}
    await app(scope, receive, send)
    return sent, inner


async def test_chunked_body_within_limit_is_replayed() -> None:
    sent, inner = await _run_chunked([b"abc", b"def"], max_bytes=10)
    assert sent[0]["status"] == 200
    assert inner.body == b"abcdef"


async def test_chunked_body_over_limit_is_rejected() -> None:
    sent, inner = await _run_chunked([b"abcdef", b"ghijkl"], max_bytes=10)
    assert sent[0]["status"] == 413
    assert json.loads(sent[1]["body"])["error"] == "Payload Too Large"
    assert inner.body == b""
