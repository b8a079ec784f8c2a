# tests/unit/test_password_manager.py
"""Tests for app/managers/password_manager.py module."""

import pytest
from pytest import mark

from app.errors import PasswordHashingError
from app.managers.password_manager import PasswordHasher, hash_password, verify_password


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


class TestPasswordHasher:
    """Tests for the synchronous bcrypt hasher."""

    def test_hash_is_bcrypt(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("qwerty1")
        assert hashed.startswith("$2b$04$")

    def test_hash_is_salted(self, hasher: PasswordHasher) -> None:
        assert hasher.hash("qwerty1") != hasher.hash("qwerty1")

    def test_verify_matching_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("qwerty1")
        assert hasher.verify("qwerty1", hashed) is True

    def test_verify_wrong_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("qwerty1")
        assert hasher.verify("qwerty2", hashed) is False

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    def test_malformed_hash_raises(self, hasher: PasswordHasher) -> None:
        with pytest.raises(PasswordHashingError):
            hasher.verify("qwerty1", "not-a-bcrypt-hash")


@mark.asyncio
async def test_async_round_trip() -> None:
    """Hashing off the event loop gives a verifiable hash."""
    hashed = await hash_password("secret12")
    assert await verify_password("secret12", hashed) is True
    assert await verify_password("secret13", hashed) is False
