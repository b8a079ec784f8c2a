"""Blog request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.configs.settings import (
    BLOG_DESCRIPTION_MAX_LENGTH,
    BLOG_NAME_MAX_LENGTH,
    BLOG_WEBSITE_URL_MAX_LENGTH,
    BLOG_WEBSITE_URL_PATTERN,
)
from app.schemas.datetime import UtcDatetime


class BlogInput(BaseModel):
    """Blog body for create and full update."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        strict=True,
        str_strip_whitespace=True,
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=BLOG_NAME_MAX_LENGTH,
        description="Blog name",
        examples=["Bali Travel"],
    )
    description: str = Field(
        ...,
        min_length=1,
        max_length=BLOG_DESCRIPTION_MAX_LENGTH,
        description="Blog description",
        examples=["Guides and stories from the island"],
    )
    website_url: str = Field(
        ...,
        alias="websiteUrl",
        min_length=1,
        max_length=BLOG_WEBSITE_URL_MAX_LENGTH,
        pattern=BLOG_WEBSITE_URL_PATTERN,
        description="Blog website (https only)",
        examples=["https://bali-travel.example.com"],
    )


class BlogResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    name: str
    description: str
    website_url: str = Field(alias="websiteUrl")
    created_at: UtcDatetime = Field(alias="createdAt")
    is_membership: bool = Field(alias="isMembership", default=False)
