"""Tests for auth endpoints: token exchange, "me" and bearer-token handling."""

from httpx import AsyncClient

from tests.fakes import InMemoryStore, bearer


async def test_verify_requires_token(client: AsyncClient) -> None:
    """POST /api/auth/verify without a token is a 400."""
    response = await client.post("/api/auth/verify", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Bad Request", "message": "Token is required."}


async def test_verify_rejects_invalid_token(client: AsyncClient) -> None:
    response = await client.post("/api/auth/verify", json={"token": "garbage"})
    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"
    assert response.json()["message"] == "Invalid or expired token. Please login again."


async def test_verify_without_profile_returns_claims_and_no_roles(
    client: AsyncClient,
) -> None:
    response = await client.post("/api/auth/verify", json={"token": "token-stu-1"})
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["uid"] == "stu-1"
    assert data["user"]["email"] == "stu-1@example.com"
    assert data["roles"] == {
        "isAdmin": False,
        "isUniversityAdmin": False,
        "universityId": None,
    }


async def test_verify_overlays_profile_and_reports_roles(
    client: AsyncClient, store: InMemoryStore, university_admin_a: str
) -> None:
    store.profiles.seed(university_admin_a, fullName="Uni Admin", city="Delhi")
    response = await client.post(
        "/api/auth/verify", json={"token": f"token-{university_admin_a}"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["fullName"] == "Uni Admin"
    assert data["user"]["city"] == "Delhi"
    assert data["roles"] == {
        "isAdmin": False,
        "isUniversityAdmin": True,
        "universityId": "uni-a",
    }


async def test_me_requires_bearer_token(client: AsyncClient) -> None:
    response = await client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json()["message"] == (
        "No token provided. Please include Authorization header with Bearer token."
    )


async def test_me_rejects_bad_token(client: AsyncClient) -> None:
    response = await client.get(
        "/api/auth/me", headers={"Authorization": "Bearer nope"}
    )
    assert response.status_code == 401


async def test_me_without_profile_returns_404(client: AsyncClient) -> None:
    response = await client.get("/api/auth/me", headers=bearer("stu-1"))
    assert response.status_code == 404
    assert response.json() == {
        "error": "Not Found",
        "message": "User profile not found.",
    }


async def test_me_returns_profile_with_roles(
    client: AsyncClient, global_admin: str
) -> None:
    response = await client.get("/api/auth/me", headers=bearer(global_admin))
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == global_admin
    assert data["roles"]["isAdmin"] is True
    assert data["roles"]["isUniversityAdmin"] is False


async def test_revoked_grant_takes_effect_on_next_request(
    client: AsyncClient, store: InMemoryStore, global_admin: str
) -> None:
    """Roles are resolved per request, never cached."""
    first = await client.get("/api/auth/me", headers=bearer(global_admin))
    assert first.json()["roles"]["isAdmin"] is True
    store.grants.admins.clear()
    second = await client.get("/api/auth/me", headers=bearer(global_admin))
    assert second.json()["roles"]["isAdmin"] is False
