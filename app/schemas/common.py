"""Shared response shapes: error bodies and the pagination envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

ItemT = TypeVar("ItemT")


class FieldError(BaseModel):
    """One offending request field."""

    field: str = Field(..., description="Request field name", examples=["login"])
    message: str = Field(..., description="First failing rule", examples=["login should be unique"])


class ErrorsMessagesResponse(BaseModel):
    """Body of every 400 validation failure."""

    model_config = ConfigDict(populate_by_name=True)

    errors_messages: list[FieldError] = Field(alias="errorsMessages")


class Paginator(BaseModel, Generic[ItemT]):
    """
    Page envelope returned by every list endpoint.

    ``pagesCount`` is ``ceil(totalCount / pageSize)`` and 0 when there are
    no matching records.
    """

    model_config = ConfigDict(populate_by_name=True)

    pages_count: int = Field(alias="pagesCount", ge=0, description="Number of pages")
    page: int = Field(ge=1, description="Current page number")
    page_size: int = Field(alias="pageSize", ge=1, description="Items per page")
    total_count: int = Field(alias="totalCount", ge=0, description="Matching records")
    items: list[ItemT] = Field(default_factory=list)


class HealthCheckResponse(BaseModel):
    status: str = Field(..., examples=["ok"])
    version: str = Field(..., examples=["1.0.0"])
    environment: str = Field(..., examples=["production"])
    timestamp: str = Field(..., examples=["2026-10-19T08:30:00.000000Z"])
