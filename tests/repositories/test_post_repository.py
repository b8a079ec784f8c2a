# tests/repositories/test_post_repository.py
"""Constraint failures in PostRepository writes surface as DatabaseError."""

from uuid import uuid4

from pytest import mark, raises

from app.db import async_session_maker
from app.errors.database import DatabaseError
from app.repositories.post import PostRepository


@mark.asyncio
async def test_post_for_missing_blog_is_a_database_error(db: None) -> None:
    async with async_session_maker() as session:
        with raises(DatabaseError) as exc_info:
            await PostRepository(session).create(
                blog_id=uuid4(),
                blog_name="Ghost",
                title="Orphan",
                short_description="No parent blog",
                content="Never stored",
            )

    assert exc_info.value.status_code == 500
    assert "integrity" in exc_info.value.detail.lower()
