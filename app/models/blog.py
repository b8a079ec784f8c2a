"""Blog database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from app.configs.settings import (
    BLOG_DESCRIPTION_MAX_LENGTH,
    BLOG_NAME_MAX_LENGTH,
    BLOG_WEBSITE_URL_MAX_LENGTH,
)
from app.utils.helpers import utc_now


class BlogDB(SQLModel, table=True):
    """Blog database model. Only the admin writes blogs."""

    __tablename__ = cast("declared_attr[str]", "blogs")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    name: str = Field(
        sa_column=Column(String(BLOG_NAME_MAX_LENGTH), nullable=False, index=True),
        description="Blog name",
    )
    description: str = Field(
        sa_column=Column(String(BLOG_DESCRIPTION_MAX_LENGTH), nullable=False),
        description="Blog description",
    )
    website_url: str = Field(
        sa_column=Column(String(BLOG_WEBSITE_URL_MAX_LENGTH), nullable=False),
        description="Blog website (https)",
    )
    is_membership: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default="false"),
        description="Membership flag (always false)",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
