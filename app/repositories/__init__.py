"""Repository layer for database operations."""

from app.repositories.base import BaseRepository
from app.repositories.blog import BlogRepository
from app.repositories.comment import CommentRepository
from app.repositories.post import PostRepository
from app.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "BlogRepository",
    "CommentRepository",
    "PostRepository",
    "UserRepository",
]
