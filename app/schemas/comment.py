"""Comment request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.configs.settings import COMMENT_CONTENT_MAX_LENGTH, COMMENT_CONTENT_MIN_LENGTH
from app.schemas.datetime import UtcDatetime


class CommentInput(BaseModel):
    """Comment body for create and update."""

    model_config = ConfigDict(frozen=True, strict=True, str_strip_whitespace=True)

    content: str = Field(
        ...,
        min_length=COMMENT_CONTENT_MIN_LENGTH,
        max_length=COMMENT_CONTENT_MAX_LENGTH,
        description="Comment text",
        examples=["Great guide, the packing list saved my trip."],
    )


class CommentatorInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    user_login: str = Field(alias="userLogin")


class CommentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    content: str
    commentator_info: CommentatorInfo = Field(alias="commentatorInfo")
    created_at: UtcDatetime = Field(alias="createdAt")
