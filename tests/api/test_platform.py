"""Tests for cross-cutting behaviour: rate limiting, body size limit and store outages."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from tests.fakes import InMemoryStore, use_in_memory_store


def _client_for(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_rate_limit_returns_429(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT", "2/minute")
    app = use_in_memory_store(create_app(), InMemoryStore())

    async with _client_for(app) as client:
        for _ in range(2):
            assert (await client.get("/api/universities")).status_code == 200
        response = await client.get("/api/universities")

    assert response.status_code == 429
    assert response.json() == {
        "error": "Too Many Requests",
        "message": "Too many requests from this IP, please try again later.",
    }


async def test_health_is_not_rate_limited(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT", "1/minute")
    app = use_in_memory_store(create_app(), InMemoryStore())

    async with _client_for(app) as client:
        for _ in range(3):
            assert (await client.get("/health")).status_code == 200


async def test_oversize_body_returns_413(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_BODY_SIZE", "64")
    app = use_in_memory_store(create_app(), InMemoryStore())

    async with _client_for(app) as client:
        response = await client.post(
            "/api/newsletter/subscribe", json={"email": "x" * 100 + "@example.com"}
        )

    assert response.status_code == 413
    assert response.json() == {
        "error": "Payload Too Large",
        "message": "Request body must be at most 64 bytes.",
    }


async def test_missing_store_returns_500() -> None:
    """Without Firebase credentials, store-backed routes fail and /health still answers."""
    app = create_app()

    async with _client_for(app) as client:
        health = await client.get("/health")
        response = await client.post(
            "/api/newsletter/subscribe", json={"email": "n@example.com"}
        )

    assert health.status_code == 200
    assert response.status_code == 500
    assert response.json() == {
        "error": "Internal Server Error",
        "message": "Document store is not configured.",
    }


async def test_malformed_json_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/registrations",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Bad Request"
