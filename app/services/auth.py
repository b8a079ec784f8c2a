"""Authentication service: login, bearer resolution, profile and registration."""

from logging import getLogger
from uuid import UUID

from app.configs import file_logger
from app.errors.auth import InvalidCredentialsError, UserAuthenticationError
from app.managers.password_manager import verify_password
from app.managers.token_manager import TokenManager
from app.models import UserDB
from app.repositories.user import UserRepository
from app.schemas.auth import MeResponse, Token
from app.schemas.user import UserCreate
from app.services.user import UserService

logger = file_logger(getLogger(__name__))

BEARER_PREFIX = "Bearer "


def parse_bearer(authorization: str | None) -> str | None:
    """
    Extract the token from an ``Authorization`` header.

    The scheme is case-sensitive and followed by exactly one space.

    Args:
        authorization: Raw header value

    Returns:
        str | None: The token, or None when the header does not match
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :]
    if not token or token != token.strip() or " " in token:
        return None
    return token


def resolve_user_id(authorization: str | None, token_manager: TokenManager) -> UUID:
    """
    Resolve the requesting user's ID from a bearer header.

    Args:
        authorization: Raw ``Authorization`` header value
        token_manager: Verifier for access tokens

    Returns:
        UUID: The ``userId`` claim of a valid token

    Raises:
        UserAuthenticationError: For a missing, malformed, tampered or expired token
    """
    token = parse_bearer(authorization)
    if token is None:
        raise UserAuthenticationError
    token_data = token_manager.decode_access_token(token)
    if token_data is None:
        raise UserAuthenticationError
    return token_data.user_id


class AuthService:
    """Service for handling user authentication."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_manager: TokenManager,
    ) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
            token_manager: Issuer and verifier of access tokens
        """
        self.user_repo = user_repo
        self.token_manager = token_manager
        self.user_service = UserService(user_repo)

    async def authenticate_user(self, login_or_email: str, password: str) -> UserDB:
        """
        Authenticate a user by login or email and password.

        Args:
            login_or_email: Exact login or case-insensitive email
            password: Plaintext password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_login_or_email(login_or_email)
        if not user:
            logger.info("Login failed: unknown user")
            raise InvalidCredentialsError

        if not await verify_password(password, user.password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise InvalidCredentialsError

        return user

    async def login(self, login_or_email: str, password: str) -> Token:
        """
        Exchange credentials for an access token.

        Args:
            login_or_email: Exact login or case-insensitive email
            password: Plaintext password

        Returns:
            Token: ``{accessToken}``
        """
        user = await self.authenticate_user(login_or_email, password)
        logger.info(f"User logged in: {user.id}")
        return Token(access_token=self.token_manager.create_access_token(user.id))

    def resolve_from_token(self, authorization: str | None) -> UUID:
        """Resolve the requesting user from a raw ``Authorization`` header."""
        return resolve_user_id(authorization, self.token_manager)

    async def me(self, user_id: UUID) -> MeResponse:
        """
        Get the profile of the token's owner.

        Raises:
            UserNotFoundError: If the user was deleted after the token was issued
        """
        user = await self.user_service.find_by_id_or_fail(user_id)
        return MeResponse(user_id=user.id, login=user.login, email=user.email)

    async def register(self, user: UserCreate) -> UserDB:
        """
        Self-register a user with the same uniqueness rules as admin creation.

        Args:
            user: Validated registration body

        Returns:
            UserDB: Created user
        """
        db_user = await self.user_service.create(user)
        logger.info(f"User registered: {db_user.id}")
        return db_user
