"""Token manager for issuing and verifying signed JWT access tokens."""

from datetime import UTC, datetime, timedelta
from logging import getLogger
from uuid import UUID

from jose import JWTError, jwt

from app.configs import Settings, file_logger
from app.schemas.auth import TokenData

logger = file_logger(getLogger(__name__))


class TokenManager:
    """
    Issue and verify HS256 access tokens carrying ``{userId, exp}``.

    Tokens are not persisted and cannot be revoked; they are valid until
    ``exp``.
    """

    def __init__(self, secret_key: str, algorithm: str, expires_in: int) -> None:
        """
        Initialize the token manager.

        Args:
            secret_key: Signing secret
            algorithm: JWS algorithm, e.g. ``HS256``
            expires_in: Token lifetime in seconds
        """
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenManager":
        return cls(
            secret_key=settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
            expires_in=settings.ACCESS_TOKEN_EXPIRE_SECONDS,
        )

    def create_access_token(
        self,
        user_id: UUID,
        expires_delta: timedelta | None = None,
    ) -> str:
        """
        Create a new access token.

        Args:
            user_id: User's UUID
            expires_delta: Optional lifetime overriding the configured one

        Returns:
            str: Encoded JWT access token
        """
        expire = datetime.now(UTC) + (expires_delta or timedelta(seconds=self.expires_in))
        to_encode = {"userId": str(user_id), "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> TokenData | None:
        """
        Decode and validate an access token.

        Args:
            token: JWT token string

        Returns:
            TokenData | None: Decoded claims, or None when the token is
            malformed, tampered with, expired or missing ``userId``
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            logger.debug("Rejected access token")
            return None

        user_id = payload.get("userId")
        if not isinstance(user_id, str) or "exp" not in payload:
            return None

        try:
            return TokenData(user_id=UUID(user_id))
        except ValueError:
            return None
