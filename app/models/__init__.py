"""Database models for the application."""

from app.models.blog import BlogDB
from app.models.comment import CommentDB
from app.models.post import PostDB
from app.models.user import UserDB

__all__ = ["BlogDB", "CommentDB", "PostDB", "UserDB"]
