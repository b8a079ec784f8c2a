"""User service: creation with uniqueness rules, listing and deletion."""

from logging import getLogger
from uuid import UUID

from app.configs import file_logger
from app.errors.database import UserNotFoundError
from app.errors.validation import EmailNotUniqueError, LoginNotUniqueError
from app.managers.password_manager import hash_password
from app.models import UserDB
from app.repositories.user import UserRepository
from app.schemas.user import UserCreate
from app.services.list_query import UserListQuery

logger = file_logger(getLogger(__name__))


class UserService:
    """Service for user accounts."""

    def __init__(self, user_repo: UserRepository) -> None:
        self.user_repo = user_repo

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a user after checking email then login uniqueness.

        The unique indexes stay the real guarantee; a concurrent insert
        that slips past the checks surfaces as the same errors from the
        repository.

        Args:
            user: Validated user body

        Returns:
            UserDB: Created user

        Raises:
            EmailNotUniqueError: If the email is taken
            LoginNotUniqueError: If the login is taken
        """
        if await self.user_repo.get_by_email(user.email):
            raise EmailNotUniqueError
        if await self.user_repo.get_by_login(user.login):
            raise LoginNotUniqueError

        password_hash = await hash_password(user.password.get_secret_value())
        db_user = await self.user_repo.create(
            login=user.login,
            email=user.email,
            password_hash=password_hash,
        )
        logger.info(f"User created: {db_user.id}")
        return db_user

    async def find_many(self, query: UserListQuery) -> tuple[list[UserDB], int]:
        return await self.user_repo.find_many(query)

    async def find_by_id_or_fail(self, user_id: UUID) -> UserDB:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise UserNotFoundError
        return user

    async def delete(self, user_id: UUID) -> None:
        """
        Hard-delete a user.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        if not await self.user_repo.delete(user_id):
            raise UserNotFoundError
        logger.info(f"User deleted: {user_id}")
