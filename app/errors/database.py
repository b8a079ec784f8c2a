from logging import getLogger

from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.errors.base import BaseAppError, create_exception_handler
from app.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseInitializationError(DatabaseError):
    """Exception raised when database initialization fails."""

    def __init__(
        self,
        detail: str = "Failed to initialize database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    def __init__(
        self,
        detail: str = "Record not found",
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class BlogNotFoundError(RecordNotFoundError):
    def __init__(self) -> None:
        super().__init__("Blog not found")


class PostNotFoundError(RecordNotFoundError):
    def __init__(self) -> None:
        super().__init__("Post not found")


class CommentNotFoundError(RecordNotFoundError):
    def __init__(self) -> None:
        super().__init__("Comment not found")


class UserNotFoundError(RecordNotFoundError):
    def __init__(self) -> None:
        super().__init__("User not found")


database_exception_handler = create_exception_handler(logger)
