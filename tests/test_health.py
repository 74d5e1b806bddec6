"""Smoke tests for health and app wiring (middleware, error shape)."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /health returns 200, status ok, environment and server time."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["environment"] == "test"
    assert data["timestamp"]


async def test_unknown_route_returns_cannot_message(client: AsyncClient) -> None:
    """Unmatched paths answer 404 with "Cannot METHOD /path"."""
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found", "message": "Cannot GET /api/nope"}


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.headers.get("x-request-id")


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """A well-formed client request ID is passed through unchanged."""
    response = await client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"
    assert response.headers["referrer-policy"] == "no-referrer"
    assert "content-security-policy" in response.headers


async def test_cors_allows_configured_origin(client: AsyncClient) -> None:
    """Preflight from an allow-listed origin is answered with that origin."""
    response = await client.options(
        "/api/universities",
        headers={
            "Origin": "https://unifriend.in",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://unifriend.in"
    assert response.headers["access-control-allow-credentials"] == "true"


async def test_cors_rejects_unknown_origin(client: AsyncClient) -> None:
    response = await client.get(
        "/health", headers={"Origin": "https://evil.example"}
    )
    assert "access-control-allow-origin" not in response.headers
