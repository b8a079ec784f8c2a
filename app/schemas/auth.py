from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class LoginRequest(BaseModel):
    """Credentials for ``POST /auth/login``."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        strict=True,
        str_strip_whitespace=True,
    )

    login_or_email: str = Field(
        ...,
        alias="loginOrEmail",
        min_length=1,
        description="Login or email address",
        examples=["johndoe"],
    )
    password: SecretStr = Field(..., min_length=1, description="Password", examples=["qwerty1"])

    @field_validator("password", mode="before")
    @classmethod
    def strip_password(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class Token(BaseModel):
    """Access token issued on successful login."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class TokenData(BaseModel):
    """Verified access token claims."""

    model_config = ConfigDict(frozen=True)

    user_id: UUID


class MeResponse(BaseModel):
    """Profile of the bearer token's owner."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(alias="userId")
    login: str
    email: str
