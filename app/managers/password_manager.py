"""
Password hashing module using bcrypt with passlib's CryptContext.

Hashing is CPU-bound, so the module-level coroutines run it in a
thread pool to keep the event loop responsive.
"""

from asyncio import get_event_loop
from concurrent.futures import ThreadPoolExecutor
from logging import getLogger

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from app.configs import file_logger, settings
from app.decorators.with_retry import with_retry
from app.errors import PasswordHashingError

executor = ThreadPoolExecutor(max_workers=4)
logger = file_logger(getLogger(__name__))


class PasswordHasher:
    """
    A password hashing and verification manager using bcrypt.

    This class wraps passlib's CryptContext to provide:
    - Salted bcrypt hashing with a configurable cost factor
    - Constant-time password verification
    """

    def __init__(self, rounds: int = settings.BCRYPT_ROUNDS) -> None:
        """
        Initialize the PasswordHasher.

        Args:
            rounds: bcrypt cost factor (log2 of the work iterations)
        """
        self.rounds = rounds
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            bcrypt__rounds=rounds,
        )
        logger.info(f"PasswordHasher initialized with bcrypt at cost {rounds}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password with a fresh salt.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in modular crypt format (``$2b$10$...``)

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("qwerty1") != hasher.hash("qwerty1")
            True
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, TypeError, InternalBackendError) as e:
            logger.exception("Error hashing password")
            msg = "Failed to hash password"
            raise PasswordHashingError(msg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a stored hash.

        A mismatch is a normal outcome and returns False. A stored hash
        that cannot be parsed is a data fault and raises.

        Args:
            password: The plaintext password to verify
            hashed_password: The stored bcrypt hash

        Returns:
            bool: True if password matches, False otherwise

        Raises:
            PasswordHashingError: If the stored hash is malformed

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_password")
            >>> hasher.verify("wrong_password", hashed)
            False
        """
        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError, InternalBackendError) as e:
            logger.exception("Stored hash is corrupted or has an invalid format")
            msg = "Stored password hash is invalid"
            raise PasswordHashingError(msg) from e


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """
    Get the default password hasher instance.

    Returns:
        PasswordHasher: The shared password hasher instance
    """
    return _default_hasher


@with_retry(base_delay=0.1, max_delay=1)
async def hash_password(password: str) -> str:
    """
    Hash a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


@with_retry(base_delay=0.1, max_delay=1)
async def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to verify
        hashed_password: The hashed password to verify against

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
