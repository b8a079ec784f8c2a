# tests/routes/test_posts.py
"""Tests for /posts."""

from typing import Any
from uuid import uuid4

from httpx import AsyncClient
from pytest import mark

POST = {
    "title": "Ubud in three days",
    "shortDescription": "A short itinerary",
    "content": "Rice terraces, temples and the monkey forest.",
}


@mark.asyncio
async def test_create_post(
    client: AsyncClient,
    blog: dict[str, Any],
    post: dict[str, Any],
) -> None:
    assert post["blogId"] == blog["id"]
    assert post["blogName"] == "Bali Travel"
    assert post["shortDescription"] == POST["shortDescription"]

    response = await client.get(f"/posts/{post['id']}")
    assert response.status_code == 200
    assert response.json() == post


@mark.asyncio
async def test_create_post_for_missing_blog(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    response = await client.post(
        "/posts",
        json={**POST, "blogId": str(uuid4())},
        headers=admin_headers,
    )

    assert response.status_code == 404


@mark.asyncio
async def test_create_post_validation(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    response = await client.post(
        "/posts",
        json={"title": "x" * 31, "shortDescription": "ok", "content": "ok", "blogId": "nope"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errorsMessages"]}
    assert fields == {"title", "blogId"}


@mark.asyncio
async def test_create_post_requires_admin(client: AsyncClient, blog: dict[str, Any]) -> None:
    response = await client.post("/posts", json={**POST, "blogId": blog["id"]})

    assert response.status_code == 401


@mark.asyncio
async def test_update_post_moves_blog_and_refreshes_name(
    client: AsyncClient,
    admin_headers: dict[str, str],
    post: dict[str, Any],
) -> None:
    other = (
        await client.post(
            "/blogs",
            json={
                "name": "Food",
                "description": "Warungs and markets",
                "websiteUrl": "https://food.example.com",
            },
            headers=admin_headers,
        )
    ).json()

    response = await client.put(
        f"/posts/{post['id']}",
        json={**POST, "title": "Updated", "blogId": other["id"]},
        headers=admin_headers,
    )
    assert response.status_code == 204

    updated = (await client.get(f"/posts/{post['id']}")).json()
    assert updated["title"] == "Updated"
    assert updated["blogId"] == other["id"]
    assert updated["blogName"] == "Food"
    assert updated["createdAt"] == post["createdAt"]


@mark.asyncio
async def test_update_post_not_found_before_blog(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    response = await client.put(
        f"/posts/{uuid4()}",
        json={**POST, "blogId": str(uuid4())},
        headers=admin_headers,
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "Post not found"}


@mark.asyncio
async def test_delete_post(
    client: AsyncClient,
    admin_headers: dict[str, str],
    post: dict[str, Any],
) -> None:
    assert (await client.delete(f"/posts/{post['id']}")).status_code == 401
    assert (await client.delete(f"/posts/{post['id']}", headers=admin_headers)).status_code == 204
    assert (await client.get(f"/posts/{post['id']}")).status_code == 404
    assert (await client.delete(f"/posts/{post['id']}", headers=admin_headers)).status_code == 404


@mark.asyncio
async def test_list_posts_sorted(
    client: AsyncClient,
    admin_headers: dict[str, str],
    blog: dict[str, Any],
) -> None:
    for title in ("b-title", "a-title", "c-title"):
        await client.post(
            f"/blogs/{blog['id']}/posts",
            json={**POST, "title": title},
            headers=admin_headers,
        )

    response = await client.get("/posts", params={"sortBy": "title", "sortDirection": "asc"})

    assert response.status_code == 200
    assert [post["title"] for post in response.json()["items"]] == ["a-title", "b-title", "c-title"]

    response = await client.get("/posts", params={"pageSize": 2, "pageNumber": 2})
    data = response.json()
    assert data["pagesCount"] == 2
    assert len(data["items"]) == 1
