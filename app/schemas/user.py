"""User request and response schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    SecretStr,
    field_validator,
)

from app.configs.settings import (
    LOGIN_MAX_LENGTH,
    LOGIN_MIN_LENGTH,
    LOGIN_PATTERN,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)
from app.schemas.datetime import UtcDatetime


class UserCreate(BaseModel):
    """User creation model, shared by admin creation and public registration."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        strict=True,
        str_strip_whitespace=True,
    )

    login: str = Field(
        ...,
        min_length=LOGIN_MIN_LENGTH,
        max_length=LOGIN_MAX_LENGTH,
        pattern=LOGIN_PATTERN,
        description="Login (letters, digits, '_' and '-')",
        examples=["johndoe"],
    )
    password: SecretStr = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password",
        examples=["qwerty1"],
    )
    email: EmailStr = Field(
        ...,
        description="Email address",
        examples=["johndoe@gmail.com"],
    )

    @field_validator("password", mode="before")
    @classmethod
    def strip_password(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.lower()


class UserResponse(BaseModel):
    """User view returned by the admin user endpoints."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    login: str
    email: str
    created_at: UtcDatetime = Field(alias="createdAt")
