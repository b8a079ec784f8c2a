from app.schemas.auth import LoginRequest, MeResponse, Token, TokenData
from app.schemas.blog import BlogInput, BlogResponse
from app.schemas.comment import CommentatorInfo, CommentInput, CommentResponse
from app.schemas.common import ErrorsMessagesResponse, FieldError, HealthCheckResponse, Paginator
from app.schemas.post import BlogPostInput, PostInput, PostResponse
from app.schemas.user import UserCreate, UserResponse

__all__ = [
    "BlogInput",
    "BlogPostInput",
    "BlogResponse",
    "CommentInput",
    "CommentResponse",
    "CommentatorInfo",
    "ErrorsMessagesResponse",
    "FieldError",
    "HealthCheckResponse",
    "LoginRequest",
    "MeResponse",
    "Paginator",
    "PostInput",
    "PostResponse",
    "Token",
    "TokenData",
    "UserCreate",
    "UserResponse",
]
