"""Pytest configuration and fixtures for the UniFriend API.

HTTP tests run app.main.create_app() over httpx's ASGITransport with the
repository and token-verifier dependencies replaced by in-memory fakes
(see tests/fakes.py). No Firebase project or network access is needed.
"""

import os

# Set before the app (and its cached settings) is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("FIREBASE_SERVICE_ACCOUNT_KEY", None)
os.environ.pop("FIREBASE_SERVICE_ACCOUNT_PATH", None)

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import get_settings
from app.main import create_app
from tests.fakes import InMemoryStore, use_in_memory_store


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Tests that change env through monkeypatch get their own Settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh in-memory document store for each test."""
    return InMemoryStore()


@pytest.fixture
def app(store: InMemoryStore) -> FastAPI:
    """Application with every store-backed dependency pointed at the fakes."""
    return use_in_memory_store(create_app(), store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def global_admin(store: InMemoryStore) -> str:
    """uid of a seeded global admin."""
    store.make_global_admin("admin-1")
    return "admin-1"


@pytest.fixture
def university_a(store: InMemoryStore) -> str:
    store.universities.seed(
        "uni-a",
        name="Alpha University",
        address="1 Alpha Road",
        location="Delhi",
        type="Private",
        rating=4.5,
        courses=[
            {
                "name": "B.Tech",
                "trades": [
                    {"name": "Computer Science", "fees": 120000},
                    {"name": "Civil", "fees": None},
                ],
            },
            {"name": "MBA"},
        ],
    )
    return "uni-a"


@pytest.fixture
def university_b(store: InMemoryStore) -> str:
    store.universities.seed(
        "uni-b",
        name="Beta Institute",
        address="2 Beta Street",
        location="Mumbai",
        type="Public",
        rating=3.9,
        about="Engineering and design",
    )
    return "uni-b"


@pytest.fixture
def university_admin_a(store: InMemoryStore, university_a: str) -> str:
    """uid of the university admin for university_a."""
    store.make_university_admin("uadmin-a", university_a)
    return "uadmin-a"
