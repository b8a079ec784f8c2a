# tests/routes/test_comments.py
"""Tests for post comments and /comments."""

from collections.abc import Awaitable, Callable
from typing import Any
from uuid import uuid4

from httpx import AsyncClient
from pytest import fixture, mark

CONTENT = "A comment that is long enough to pass"


@fixture
async def author_headers(
    create_user: Callable[..., Awaitable[dict[str, Any]]],
    login_headers: Callable[..., Awaitable[dict[str, str]]],
) -> dict[str, str]:
    await create_user(login="author", email="author@example.com")
    return await login_headers("author")


@fixture
async def stranger_headers(
    create_user: Callable[..., Awaitable[dict[str, Any]]],
    login_headers: Callable[..., Awaitable[dict[str, str]]],
) -> dict[str, str]:
    await create_user(login="stranger", email="stranger@example.com")
    return await login_headers("stranger")


@fixture
async def comment(
    client: AsyncClient,
    post: dict[str, Any],
    author_headers: dict[str, str],
) -> dict[str, Any]:
    response = await client.post(
        f"/posts/{post['id']}/comments",
        json={"content": CONTENT},
        headers=author_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@mark.asyncio
async def test_create_comment(client: AsyncClient, comment: dict[str, Any]) -> None:
    assert comment["content"] == CONTENT
    assert comment["commentatorInfo"]["userLogin"] == "author"
    assert set(comment) == {"id", "content", "commentatorInfo", "createdAt"}

    response = await client.get(f"/comments/{comment['id']}")
    assert response.status_code == 200
    assert response.json() == comment


@mark.asyncio
async def test_create_comment_requires_bearer(
    client: AsyncClient,
    admin_headers: dict[str, str],
    post: dict[str, Any],
) -> None:
    url = f"/posts/{post['id']}/comments"

    assert (await client.post(url, json={"content": CONTENT})).status_code == 401
    assert (await client.post(url, json={"content": CONTENT}, headers=admin_headers)).status_code == 401


@mark.asyncio
async def test_create_comment_validation(
    client: AsyncClient,
    post: dict[str, Any],
    author_headers: dict[str, str],
) -> None:
    response = await client.post(
        f"/posts/{post['id']}/comments",
        json={"content": "too short"},
        headers=author_headers,
    )

    assert response.status_code == 400
    assert response.json()["errorsMessages"][0]["field"] == "content"


@mark.asyncio
async def test_comment_on_missing_post(
    client: AsyncClient,
    db: None,
    author_headers: dict[str, str],
) -> None:
    response = await client.post(
        f"/posts/{uuid4()}/comments",
        json={"content": CONTENT},
        headers=author_headers,
    )

    assert response.status_code == 404
    assert (await client.get(f"/posts/{uuid4()}/comments")).status_code == 404


@mark.asyncio
async def test_list_post_comments(
    client: AsyncClient,
    post: dict[str, Any],
    comment: dict[str, Any],
) -> None:
    response = await client.get(f"/posts/{post['id']}/comments")

    assert response.status_code == 200
    data = response.json()
    assert data["totalCount"] == 1
    assert data["items"] == [comment]


@mark.asyncio
async def test_update_comment_by_author(
    client: AsyncClient,
    comment: dict[str, Any],
    author_headers: dict[str, str],
) -> None:
    new_content = "An edited comment, still long enough"

    response = await client.put(
        f"/comments/{comment['id']}",
        json={"content": new_content},
        headers=author_headers,
    )
    assert response.status_code == 204

    updated = (await client.get(f"/comments/{comment['id']}")).json()
    assert updated["content"] == new_content
    assert updated["createdAt"] == comment["createdAt"]


@mark.asyncio
async def test_other_user_is_forbidden(
    client: AsyncClient,
    comment: dict[str, Any],
    stranger_headers: dict[str, str],
) -> None:
    url = f"/comments/{comment['id']}"

    assert (await client.put(url, json={"content": CONTENT}, headers=stranger_headers)).status_code == 403
    assert (await client.delete(url, headers=stranger_headers)).status_code == 403
    assert (await client.get(url)).status_code == 200


@mark.asyncio
async def test_not_found_wins_over_forbidden(
    client: AsyncClient,
    stranger_headers: dict[str, str],
) -> None:
    url = f"/comments/{uuid4()}"

    assert (await client.put(url, json={"content": CONTENT}, headers=stranger_headers)).status_code == 404
    assert (await client.delete(url, headers=stranger_headers)).status_code == 404


@mark.asyncio
async def test_unauthorized_wins_over_everything(client: AsyncClient, db: None) -> None:
    response = await client.put(f"/comments/{uuid4()}", json={"content": "short"})

    assert response.status_code == 401


@mark.asyncio
async def test_delete_comment_by_author(
    client: AsyncClient,
    comment: dict[str, Any],
    author_headers: dict[str, str],
) -> None:
    url = f"/comments/{comment['id']}"

    assert (await client.delete(url, headers=author_headers)).status_code == 204
    assert (await client.get(url)).status_code == 404


@mark.asyncio
async def test_comment_survives_author_deletion(
    client: AsyncClient,
    admin_headers: dict[str, str],
    comment: dict[str, Any],
) -> None:
    user_id = comment["commentatorInfo"]["userId"]
    assert (await client.delete(f"/users/{user_id}", headers=admin_headers)).status_code == 204

    response = await client.get(f"/comments/{comment['id']}")

    assert response.status_code == 200
    assert response.json()["commentatorInfo"]["userLogin"] == "author"


@mark.asyncio
async def test_deleting_post_removes_comments(
    client: AsyncClient,
    admin_headers: dict[str, str],
    post: dict[str, Any],
    comment: dict[str, Any],
) -> None:
    assert (await client.delete(f"/posts/{post['id']}", headers=admin_headers)).status_code == 204

    assert (await client.get(f"/comments/{comment['id']}")).status_code == 404
