"""Tests for profile endpoints: lazy creation, owner/admin reads and updates."""

from httpx import AsyncClient

from tests.fakes import InMemoryStore, bearer


async def test_me_creates_profile_from_token(
    client: AsyncClient, store: InMemoryStore
) -> None:
    """First GET /api/users/me creates the profile from token claims."""
    response = await client.get("/api/users/me", headers=bearer("stu-1"))
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "stu-1"
    assert data["email"] == "stu-1@example.com"
    assert data["fullName"] == "User stu-1"
    assert "stu-1" in store.profiles.docs


async def test_me_returns_existing_profile_unchanged(
    client: AsyncClient, store: InMemoryStore
) -> None:
    store.profiles.seed("stu-1", email="old@example.com", fullName="Old Name", city="Pune")
    response = await client.get("/api/users/me", headers=bearer("stu-1"))
    data = response.json()
    assert data["email"] == "old@example.com"
    assert data["city"] == "Pune"


async def test_owner_reads_own_profile(
    client: AsyncClient, store: InMemoryStore
) -> None:
    store.profiles.seed("stu-1", email="a@example.com", fullName="A")
    response = await client.get("/api/users/stu-1", headers=bearer("stu-1"))
    assert response.status_code == 200
    assert response.json()["fullName"] == "A"


async def test_other_user_cannot_read_profile(
    client: AsyncClient, store: InMemoryStore
) -> None:
    store.profiles.seed("stu-1", email="a@example.com", fullName="A")
    response = await client.get("/api/users/stu-1", headers=bearer("stu-2"))
    assert response.status_code == 403
    assert response.json()["message"] == "You can only view your own profile."


async def test_university_admin_cannot_read_student_profile(
    client: AsyncClient, store: InMemoryStore, university_admin_a: str
) -> None:
    store.profiles.seed("stu-1", email="a@example.com", fullName="A")
    response = await client.get("/api/users/stu-1", headers=bearer(university_admin_a))
    assert response.status_code == 403


async def test_global_admin_reads_any_profile(
    client: AsyncClient, store: InMemoryStore, global_admin: str
) -> None:
    store.profiles.seed("stu-1", email="a@example.com", fullName="A")
    response = await client.get("/api/users/stu-1", headers=bearer(global_admin))
    assert response.status_code == 200


async def test_missing_profile_returns_404(
    client: AsyncClient, global_admin: str
) -> None:
    response = await client.get("/api/users/ghost", headers=bearer(global_admin))
    assert response.status_code == 404
    assert response.json()["message"] == "User not found."


async def test_update_own_profile_ignores_immutable_keys(
    client: AsyncClient, store: InMemoryStore
) -> None:
    store.profiles.seed("stu-1", email="a@example.com", fullName="A", createdAt="orig")
    response = await client.put(
        "/api/users/stu-1",
        json={
            "id": "someone-else",
            "createdAt": "2000-01-01T00:00:00Z",
            "fullName": "Asha K",
            "city": "Jaipur",
            "preferredIntake": "2027",
        },
        headers=bearer("stu-1"),
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Profile updated successfully."
    assert data["id"] == "stu-1"
    assert data["fullName"] == "Asha K"
    assert data["preferredIntake"] == "2027"
    stored = store.profiles.docs["stu-1"]
    assert stored["createdAt"] == "orig"
    assert stored["id"] == "stu-1"
    assert stored["updatedAt"] is not None


async def test_update_other_profile_is_forbidden(
    client: AsyncClient, store: InMemoryStore
) -> None:
    store.profiles.seed("stu-1", email="a@example.com", fullName="A")
    response = await client.put(
        "/api/users/stu-1", json={"city": "X"}, headers=bearer("stu-2")
    )
    assert response.status_code == 403
    assert response.json()["message"] == "You can only update your own profile."


async def test_update_missing_profile_returns_404(client: AsyncClient) -> None:
    response = await client.put(
        "/api/users/stu-1", json={"city": "X"}, headers=bearer("stu-1")
    )
    assert response.status_code == 404


async def test_update_accepts_numeric_phone(
    client: AsyncClient, store: InMemoryStore
) -> None:
    store.profiles.seed("stu-1", email="a@example.com", fullName="A")
    response = await client.put(
        "/api/users/stu-1", json={"phone": 9876543210}, headers=bearer("stu-1")
    )
    assert response.status_code == 200, response.text
    assert response.json()["phone"] == 9876543210


async def test_put_me_treats_me_as_a_profile_id(client: AsyncClient) -> None:
    """Updates go through /api/users/{userId}; "me" is just another id there."""
    response = await client.put(
        "/api/users/me", json={"city": "X"}, headers=bearer("stu-1")
    )
    assert response.status_code == 403
