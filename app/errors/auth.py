"""Authentication and authorization errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Unauthorized",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when login credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid login or password", HTTP_401_UNAUTHORIZED)


class ForbiddenError(BaseAppError):
    """Raised when an authenticated user may not act on a resource."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


auth_exception_handler = create_exception_handler(logger)
