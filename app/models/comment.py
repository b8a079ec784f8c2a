"""Comment database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from app.configs.settings import COMMENT_CONTENT_MAX_LENGTH, LOGIN_MAX_LENGTH
from app.utils.helpers import utc_now


class CommentDB(SQLModel, table=True):
    """
    Comment database model.

    ``user_id`` carries no foreign key: comments outlive their author and
    keep the ``user_login`` snapshot.
    """

    __tablename__ = cast("declared_attr[str]", "comments")

    __table_args__ = (Index("ix_comments_post_created", "post_id", "created_at"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Comment ID",
    )
    post_id: UUID = Field(
        sa_column=Column(
            "post_id",
            ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Post ID (foreign key to posts.id)",
    )
    user_id: UUID = Field(nullable=False, index=True, description="Commentator ID")
    user_login: str = Field(
        sa_column=Column(String(LOGIN_MAX_LENGTH), nullable=False),
        description="Commentator login at write time",
    )
    content: str = Field(
        sa_column=Column(String(COMMENT_CONTENT_MAX_LENGTH), nullable=False),
        description="Comment text",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
