from logging import getLogger

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.errors.base import BaseAppError, create_exception_handler
from app.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class PasswordHashingError(BaseAppError):
    """Raised when a password cannot be hashed or a stored hash is unreadable."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


password_hashing_exception_handler = create_exception_handler(logger)
