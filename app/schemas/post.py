"""Post request and response schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.configs.settings import (
    POST_CONTENT_MAX_LENGTH,
    POST_SHORT_DESCRIPTION_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
)
from app.schemas.datetime import UtcDatetime


class BlogPostInput(BaseModel):
    """Post body when the blog comes from the path (``/blogs/{blogId}/posts``)."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        strict=True,
        str_strip_whitespace=True,
    )

    title: str = Field(
        ...,
        min_length=1,
        max_length=POST_TITLE_MAX_LENGTH,
        description="Post title",
        examples=["What to pack for Bali"],
    )
    short_description: str = Field(
        ...,
        alias="shortDescription",
        min_length=1,
        max_length=POST_SHORT_DESCRIPTION_MAX_LENGTH,
        description="Short description",
        examples=["A practical packing list"],
    )
    content: str = Field(
        ...,
        min_length=1,
        max_length=POST_CONTENT_MAX_LENGTH,
        description="Post content",
        examples=["Sunscreen, sandals and a light rain jacket."],
    )


class PostInput(BlogPostInput):
    """Post body for create and full update."""

    blog_id: UUID = Field(
        ...,
        alias="blogId",
        strict=False,
        description="Parent blog ID",
        examples=["123e4567-e89b-12d3-a456-426614174000"],
    )


class PostResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    title: str
    short_description: str = Field(alias="shortDescription")
    content: str
    blog_id: str = Field(alias="blogId")
    blog_name: str = Field(alias="blogName")
    created_at: UtcDatetime = Field(alias="createdAt")
