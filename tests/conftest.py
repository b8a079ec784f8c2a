# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must be set before app is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["ENABLE_TESTING_ROUTES"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_TO_FILE"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "qwerty"
os.environ["BCRYPT_ROUNDS"] = "4"

from base64 import b64encode
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

from httpx import ASGITransport, AsyncClient
from pytest import fixture
from sqlmodel import SQLModel

from app.db import engine
from app.main import app
from app.managers.rate_limiter import limiter

ADMIN_HEADERS = {"Authorization": f"Basic {b64encode(b'admin:qwerty').decode()}"}

VALID_BLOG = {
    "name": "Bali Travel",
    "description": "Guides and stories from the island",
    "websiteUrl": "https://bali-travel.example.com",
}

VALID_POST = {
    "title": "Ubud in three days",
    "shortDescription": "A short itinerary",
    "content": "Rice terraces, temples and the monkey forest.",
}


@fixture
async def db() -> AsyncGenerator[None]:
    """Create every table for one test and dispose of the in-memory database after."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@fixture
async def client(db: None) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac


@fixture
def admin_headers() -> dict[str, str]:
    return dict(ADMIN_HEADERS)


@fixture
def create_user(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Factory creating a user through the admin endpoint."""

    async def _create(
        login: str = "johndoe",
        email: str = "johndoe@gmail.com",
        password: str = "qwerty1",
    ) -> dict[str, Any]:
        response = await client.post(
            "/users",
            json={"login": login, "email": email, "password": password},
            headers=ADMIN_HEADERS,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@fixture
def login_headers(client: AsyncClient) -> Callable[..., Awaitable[dict[str, str]]]:
    """Factory returning bearer headers for existing credentials."""

    async def _login(login_or_email: str = "johndoe", password: str = "qwerty1") -> dict[str, str]:
        response = await client.post(
            "/auth/login",
            json={"loginOrEmail": login_or_email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}

    return _login


@fixture
async def blog(client: AsyncClient) -> dict[str, Any]:
    response = await client.post("/blogs", json=VALID_BLOG, headers=ADMIN_HEADERS)
    assert response.status_code == 201, response.text
    return response.json()


@fixture
async def post(client: AsyncClient, blog: dict[str, Any]) -> dict[str, Any]:
    response = await client.post(
        "/posts",
        json={**VALID_POST, "blogId": blog["id"]},
        headers=ADMIN_HEADERS,
    )
    assert response.status_code == 201, response.text
    return response.json()
