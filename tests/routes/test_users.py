# tests/routes/test_users.py
"""Tests for the admin /users endpoints."""

from collections.abc import Awaitable, Callable
from typing import Any
from uuid import uuid4

from httpx import AsyncClient
from pytest import mark


@mark.asyncio
async def test_create_user(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post(
        "/users",
        json={"login": "johndoe", "email": "johndoe@gmail.com", "password": "qwerty1"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    data = response.json()
    assert set(data) == {"id", "login", "email", "createdAt"}
    assert data["createdAt"].endswith("Z")


@mark.asyncio
async def test_requires_admin(client: AsyncClient) -> None:
    body = {"login": "johndoe", "email": "johndoe@gmail.com", "password": "qwerty1"}

    assert (await client.post("/users", json=body)).status_code == 401
    assert (await client.get("/users")).status_code == 401
    assert (await client.get("/users", auth=("admin", "wrong"))).status_code == 401
    assert (await client.delete(f"/users/{uuid4()}")).status_code == 401


@mark.asyncio
async def test_auth_checked_before_validation(client: AsyncClient) -> None:
    response = await client.post("/users", json={"login": "x"})

    assert response.status_code == 401


@mark.asyncio
async def test_list_users_search_is_or_combined(
    client: AsyncClient,
    admin_headers: dict[str, str],
    create_user: Callable[..., Awaitable[dict[str, Any]]],
) -> None:
    await create_user(login="alpha", email="one@example.com")
    await create_user(login="beta", email="alpha@example.com")
    await create_user(login="gamma", email="three@example.com")

    response = await client.get(
        "/users",
        params={"searchLoginTerm": "ALP", "searchEmailTerm": "alpha@", "sortBy": "login"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totalCount"] == 2
    assert [user["login"] for user in data["items"]] == ["beta", "alpha"]


@mark.asyncio
async def test_list_users_page_size_is_clamped(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    response = await client.get("/users", params={"pageSize": 500}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "pagesCount": 0,
        "page": 1,
        "pageSize": 20,
        "totalCount": 0,
        "items": [],
    }


@mark.asyncio
async def test_list_users_paging(
    client: AsyncClient,
    admin_headers: dict[str, str],
    create_user: Callable[..., Awaitable[dict[str, Any]]],
) -> None:
    for i in range(3):
        await create_user(login=f"user{i}", email=f"user{i}@example.com")

    response = await client.get(
        "/users",
        params={"pageSize": 2, "pageNumber": 2, "sortBy": "login", "sortDirection": "asc"},
        headers=admin_headers,
    )

    data = response.json()
    assert data["pagesCount"] == 2
    assert data["totalCount"] == 3
    assert [user["login"] for user in data["items"]] == ["user2"]


@mark.asyncio
async def test_delete_user(
    client: AsyncClient,
    admin_headers: dict[str, str],
    create_user: Callable[..., Awaitable[dict[str, Any]]],
) -> None:
    user = await create_user()

    response = await client.delete(f"/users/{user['id']}", headers=admin_headers)
    assert response.status_code == 204

    response = await client.delete(f"/users/{user['id']}", headers=admin_headers)
    assert response.status_code == 404


@mark.asyncio
async def test_delete_user_malformed_id(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    response = await client.delete("/users/not-a-uuid", headers=admin_headers)

    assert response.status_code == 400
