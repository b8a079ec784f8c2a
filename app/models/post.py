"""Post database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from app.configs.settings import (
    BLOG_NAME_MAX_LENGTH,
    POST_CONTENT_MAX_LENGTH,
    POST_SHORT_DESCRIPTION_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
)
from app.utils.helpers import utc_now


class PostDB(SQLModel, table=True):
    """
    Post database model.

    ``blog_name`` is a snapshot of the parent blog's name taken on every
    create and update of the post.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (Index("ix_posts_blog_created", "blog_id", "created_at"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )
    blog_id: UUID = Field(
        sa_column=Column(
            "blog_id",
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Parent blog ID (foreign key to blogs.id)",
    )
    blog_name: str = Field(
        sa_column=Column(String(BLOG_NAME_MAX_LENGTH), nullable=False),
        description="Parent blog name at write time",
    )
    title: str = Field(
        sa_column=Column(String(POST_TITLE_MAX_LENGTH), nullable=False),
        description="Post title",
    )
    short_description: str = Field(
        sa_column=Column(String(POST_SHORT_DESCRIPTION_MAX_LENGTH), nullable=False),
        description="Post short description",
    )
    content: str = Field(
        sa_column=Column(String(POST_CONTENT_MAX_LENGTH), nullable=False),
        description="Post content",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
