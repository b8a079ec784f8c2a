"""Fixtures for service tests with mocked repositories."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from pytest import fixture

from app.models import BlogDB, CommentDB, PostDB, UserDB
from app.repositories import BlogRepository, CommentRepository, PostRepository, UserRepository


@fixture
def user_repo() -> MagicMock:
    mock = MagicMock(spec=UserRepository)
    mock.get_by_id = AsyncMock(return_value=None)
    mock.get_by_email = AsyncMock(return_value=None)
    mock.get_by_login = AsyncMock(return_value=None)
    mock.get_by_login_or_email = AsyncMock(return_value=None)
    mock.create = AsyncMock()
    mock.delete = AsyncMock(return_value=True)
    return mock


@fixture
def blog_repo() -> MagicMock:
    mock = MagicMock(spec=BlogRepository)
    mock.get_by_id = AsyncMock(return_value=None)
    mock.exists = AsyncMock(return_value=False)
    return mock


@fixture
def post_repo() -> MagicMock:
    mock = MagicMock(spec=PostRepository)
    mock.get_by_id = AsyncMock(return_value=None)
    mock.exists = AsyncMock(return_value=False)
    mock.create = AsyncMock()
    mock.update = AsyncMock()
    mock.find_many = AsyncMock(return_value=([], 0))
    return mock


@fixture
def comment_repo() -> MagicMock:
    mock = MagicMock(spec=CommentRepository)
    mock.get_by_id = AsyncMock(return_value=None)
    mock.create = AsyncMock()
    mock.update = AsyncMock()
    mock.delete = AsyncMock(return_value=True)
    return mock


@fixture
def sample_user() -> UserDB:
    return UserDB(
        id=uuid4(),
        login="johndoe",
        email="johndoe@gmail.com",
        password_hash="$2b$04$abcdefghijklmnopqrstuu5hUzQx1v0dC7Sg9KcQw1ZLd8xW3n5y6",
    )


@fixture
def sample_blog() -> BlogDB:
    return BlogDB(
        id=uuid4(),
        name="Bali Travel",
        description="Guides and stories",
        website_url="https://bali-travel.example.com",
    )


@fixture
def sample_post(sample_blog: BlogDB) -> PostDB:
    return PostDB(
        id=uuid4(),
        blog_id=sample_blog.id,
        blog_name=sample_blog.name,
        title="Ubud in three days",
        short_description="A short itinerary",
        content="Rice terraces and temples",
    )


@fixture
def sample_comment(sample_post: PostDB, sample_user: UserDB) -> CommentDB:
    return CommentDB(
        id=uuid4(),
        post_id=sample_post.id,
        user_id=sample_user.id,
        user_login=sample_user.login,
        content="A comment that is long enough",
    )
