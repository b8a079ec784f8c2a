# tests/routes/test_blogs.py
"""Tests for /blogs and the blog-scoped post endpoints."""

from typing import Any
from uuid import uuid4

from httpx import AsyncClient
from pytest import mark

BLOG = {
    "name": "Bali Travel",
    "description": "Guides and stories from the island",
    "websiteUrl": "https://bali-travel.example.com",
}

POST = {
    "title": "Ubud in three days",
    "shortDescription": "A short itinerary",
    "content": "Rice terraces, temples and the monkey forest.",
}


@mark.asyncio
async def test_create_blog(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post("/blogs", json=BLOG, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Bali Travel"
    assert data["websiteUrl"] == BLOG["websiteUrl"]
    assert data["isMembership"] is False
    assert data["createdAt"].endswith("Z")

    response = await client.get(f"/blogs/{data['id']}")
    assert response.status_code == 200
    assert response.json() == data


@mark.asyncio
async def test_create_blog_requires_admin(client: AsyncClient) -> None:
    response = await client.post("/blogs", json=BLOG)

    assert response.status_code == 401


@mark.asyncio
async def test_create_blog_validation(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post(
        "/blogs",
        json={"name": "x" * 16, "description": "ok", "websiteUrl": "http://insecure.com"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    errors = response.json()["errorsMessages"]
    assert {error["field"] for error in errors} == {"name", "websiteUrl"}
    assert len(errors) == 2


@mark.asyncio
async def test_blank_name_is_rejected(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post("/blogs", json={**BLOG, "name": "   "}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errorsMessages"][0]["field"] == "name"


@mark.asyncio
async def test_malformed_json_body(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post(
        "/blogs",
        content=b'{"name": "Bali", "description":',
        headers={**admin_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["errorsMessages"] == [
        {"field": "body", "message": "JSON decode error"},
    ]


@mark.asyncio
async def test_get_missing_blog(client: AsyncClient) -> None:
    assert (await client.get(f"/blogs/{uuid4()}")).status_code == 404
    assert (await client.get("/blogs/not-a-uuid")).status_code == 400


@mark.asyncio
async def test_list_blogs_search_and_sort(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    for name in ("Tech Talk", "Food", "TECHNO"):
        await client.post("/blogs", json={**BLOG, "name": name}, headers=admin_headers)

    response = await client.get(
        "/blogs",
        params={"searchNameTerm": "tech", "sortBy": "name", "sortDirection": "asc"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totalCount"] == 2
    assert data["pagesCount"] == 1
    assert [blog["name"] for blog in data["items"]] == ["TECHNO", "Tech Talk"]


@mark.asyncio
async def test_list_blogs_search_escapes_wildcards(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    await client.post("/blogs", json={**BLOG, "name": "100% Bali"}, headers=admin_headers)
    await client.post("/blogs", json={**BLOG, "name": "100 Bali"}, headers=admin_headers)

    response = await client.get("/blogs", params={"searchNameTerm": "0%"})

    assert [blog["name"] for blog in response.json()["items"]] == ["100% Bali"]


@mark.asyncio
async def test_list_blogs_rejects_bad_paging(client: AsyncClient) -> None:
    assert (await client.get("/blogs", params={"pageSize": 101})).status_code == 400
    assert (await client.get("/blogs", params={"pageSize": 0})).status_code == 400
    assert (await client.get("/blogs", params={"pageNumber": 0})).status_code == 400
    assert (await client.get("/blogs", params={"sortBy": "password"})).status_code == 400
    assert (await client.get("/blogs", params={"sortDirection": "up"})).status_code == 400


@mark.asyncio
async def test_list_blogs_empty(client: AsyncClient) -> None:
    response = await client.get("/blogs")

    assert response.json() == {
        "pagesCount": 0,
        "page": 1,
        "pageSize": 10,
        "totalCount": 0,
        "items": [],
    }


@mark.asyncio
async def test_update_blog_keeps_post_snapshot(
    client: AsyncClient,
    admin_headers: dict[str, str],
    blog: dict[str, Any],
    post: dict[str, Any],
) -> None:
    response = await client.put(
        f"/blogs/{blog['id']}",
        json={**BLOG, "name": "Renamed"},
        headers=admin_headers,
    )
    assert response.status_code == 204

    updated = (await client.get(f"/blogs/{blog['id']}")).json()
    assert updated["name"] == "Renamed"
    assert updated["createdAt"] == blog["createdAt"]

    response = await client.get(f"/posts/{post['id']}")
    assert response.json()["blogName"] == "Bali Travel"


@mark.asyncio
async def test_update_missing_blog(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.put(f"/blogs/{uuid4()}", json=BLOG, headers=admin_headers)

    assert response.status_code == 404


@mark.asyncio
async def test_delete_blog_cascades_to_posts_and_comments(
    client: AsyncClient,
    admin_headers: dict[str, str],
    blog: dict[str, Any],
    post: dict[str, Any],
) -> None:
    response = await client.delete(f"/blogs/{blog['id']}", headers=admin_headers)
    assert response.status_code == 204

    assert (await client.get(f"/blogs/{blog['id']}")).status_code == 404
    assert (await client.get(f"/posts/{post['id']}")).status_code == 404
    assert (await client.delete(f"/blogs/{blog['id']}", headers=admin_headers)).status_code == 404


@mark.asyncio
async def test_create_and_list_blog_posts(
    client: AsyncClient,
    admin_headers: dict[str, str],
    blog: dict[str, Any],
) -> None:
    response = await client.post(f"/blogs/{blog['id']}/posts", json=POST, headers=admin_headers)
    assert response.status_code == 201
    created = response.json()
    assert created["blogId"] == blog["id"]
    assert created["blogName"] == blog["name"]

    response = await client.get(f"/blogs/{blog['id']}/posts")
    assert response.status_code == 200
    data = response.json()
    assert data["totalCount"] == 1
    assert data["items"] == [created]


@mark.asyncio
async def test_blog_posts_of_missing_blog(
    client: AsyncClient,
    admin_headers: dict[str, str],
) -> None:
    missing = uuid4()

    assert (await client.get(f"/blogs/{missing}/posts")).status_code == 404
    response = await client.post(f"/blogs/{missing}/posts", json=POST, headers=admin_headers)
    assert response.status_code == 404


@mark.asyncio
async def test_blog_posts_are_scoped(
    client: AsyncClient,
    admin_headers: dict[str, str],
    blog: dict[str, Any],
    post: dict[str, Any],
) -> None:
    other = (await client.post("/blogs", json={**BLOG, "name": "Other"}, headers=admin_headers)).json()

    response = await client.get(f"/blogs/{other['id']}/posts")

    assert response.json()["totalCount"] == 0
