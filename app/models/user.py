"""User database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from app.configs.settings import LOGIN_MAX_LENGTH
from app.utils.helpers import utc_now


class UserDB(SQLModel, table=True):
    """
    User database model.

    Login is unique as typed; email is stored lower-cased so its unique
    index is case-insensitive in effect.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    login: str = Field(
        sa_column=Column(String(LOGIN_MAX_LENGTH), unique=True, nullable=False, index=True),
        description="Login (unique, case-sensitive)",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique, lower-cased)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="bcrypt password hash",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "login": "johndoe",
                "email": "johndoe@gmail.com",
            },
        },
    )
