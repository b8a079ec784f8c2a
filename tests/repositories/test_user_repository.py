# tests/repositories/test_user_repository.py
"""Unique-index handling in UserRepository.create, without the service pre-check."""

from pytest import mark, raises

from app.db import async_session_maker, transaction
from app.errors.validation import EmailNotUniqueError, LoginNotUniqueError
from app.repositories.user import UserRepository, conflicting_field


async def _seed(login: str, email: str) -> None:
    async with transaction() as session:
        await UserRepository(session).create(login=login, email=email, password_hash="hash")


@mark.asyncio
async def test_same_email_twice_is_an_email_conflict(db: None) -> None:
    await _seed("johndoe", "johndoe@gmail.com")

    async with async_session_maker() as session:
        with raises(EmailNotUniqueError) as exc_info:
            await UserRepository(session).create(
                login="janedoe",
                email="JohnDoe@gmail.com",
                password_hash="hash",
            )

    assert exc_info.value.errors == [{"field": "email", "message": "email should be unique"}]


@mark.asyncio
async def test_same_login_twice_is_a_login_conflict(db: None) -> None:
    await _seed("email", "first@gmail.com")

    async with async_session_maker() as session:
        with raises(LoginNotUniqueError) as exc_info:
            await UserRepository(session).create(
                login="email",
                email="second@gmail.com",
                password_hash="hash",
            )

    assert exc_info.value.errors == [{"field": "login", "message": "login should be unique"}]


@mark.asyncio
async def test_session_is_usable_after_conflict(db: None) -> None:
    await _seed("johndoe", "johndoe@gmail.com")

    async with async_session_maker() as session:
        repo = UserRepository(session)
        with raises(LoginNotUniqueError):
            await repo.create(login="johndoe", email="other@gmail.com", password_hash="hash")
        created = await repo.create(login="janedoe", email="janedoe@gmail.com", password_hash="hash")
        await session.commit()

    assert created.login == "janedoe"


def test_conflicting_field_sqlite_messages() -> None:
    assert conflicting_field("UNIQUE constraint failed: users.email") == "email"
    assert conflicting_field("UNIQUE constraint failed: users.login") == "login"


def test_conflicting_field_postgres_ignores_detail_value() -> None:
    message = (
        'duplicate key value violates unique constraint "ix_users_login"\n'
        "DETAIL:  Key (login)=(email) already exists."
    )

    assert conflicting_field(message) == "login"


def test_conflicting_field_postgres_email_index() -> None:
    message = (
        'duplicate key value violates unique constraint "ix_users_email"\n'
        "DETAIL:  Key (email)=(login@gmail.com) already exists."
    )

    assert conflicting_field(message) == "email"


def test_conflicting_field_unrelated_violation() -> None:
    assert conflicting_field('null value in column "login" violates not-null constraint') is None
    assert conflicting_field("") is None
