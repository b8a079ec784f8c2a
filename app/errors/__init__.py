from app.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    UserAuthenticationError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    BlogNotFoundError,
    CommentNotFoundError,
    DatabaseError,
    DatabaseInitializationError,
    PostNotFoundError,
    RecordNotFoundError,
    UserNotFoundError,
    database_exception_handler,
)
from app.errors.password_hasher import PasswordHashingError, password_hashing_exception_handler
from app.errors.validation import (
    EmailNotUniqueError,
    LoginNotUniqueError,
    ValidationError,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "BlogNotFoundError",
    "CommentNotFoundError",
    "DatabaseError",
    "DatabaseInitializationError",
    "EmailNotUniqueError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "LoginNotUniqueError",
    "PasswordHashingError",
    "PostNotFoundError",
    "RecordNotFoundError",
    "UserAuthenticationError",
    "UserNotFoundError",
    "ValidationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
