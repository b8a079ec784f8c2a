"""
List query resolution shared by every collection endpoint.

Turns raw paging and sorting parameters into a canonical ``ListQuery``
and wraps a page of results in the ``Paginator`` envelope.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from math import ceil
from typing import Literal, TypeVar

from app.configs.settings import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from app.schemas.common import Paginator

ItemT = TypeVar("ItemT")

BlogSortField = Literal["name", "description", "websiteUrl", "createdAt"]
PostSortField = Literal["title", "shortDescription", "content", "blogId", "blogName", "createdAt"]
CommentSortField = Literal["createdAt"]
UserSortField = Literal["login", "email", "createdAt"]


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ListQuery:
    """
    Canonical paging and sorting parameters.

    Attributes:
        page_number: 1-based page index
        page_size: Items per page, already validated or clamped
        sort_by: API field name to sort by
        sort_direction: ``asc`` or ``desc``
    """

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str = "createdAt"
    sort_direction: SortDirection = SortDirection.DESC

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class BlogListQuery(ListQuery):
    search_name_term: str | None = None


@dataclass(frozen=True)
class UserListQuery(ListQuery):
    search_login_term: str | None = None
    search_email_term: str | None = None


def clean_term(term: str | None) -> str | None:
    """Return a search term, or None when it is absent or blank."""
    if term is None:
        return None
    term = term.strip()
    return term or None


def clamp_page_size(page_size: int, maximum: int) -> int:
    """Clamp a requested page size into ``[1, maximum]``."""
    return max(1, min(page_size, maximum))


def pages_count(total_count: int, page_size: int) -> int:
    """
    Number of pages needed for ``total_count`` items.

    Args:
        total_count: Matching records
        page_size: Items per page (>= 1)

    Returns:
        int: ``ceil(total_count / page_size)``; 0 when there are no records
    """
    if total_count <= 0:
        return 0
    return ceil(total_count / page_size)


def to_paginator(
    items: Sequence[ItemT],
    total_count: int,
    query: ListQuery,
) -> Paginator[ItemT]:
    """
    Wrap one page of mapped items in the list envelope.

    Args:
        items: Items of the requested page, already mapped for output
        total_count: Matching records across all pages
        query: The query that produced the page

    Returns:
        Paginator: ``{pagesCount, page, pageSize, totalCount, items}``
    """
    return Paginator(
        pages_count=pages_count(total_count, query.page_size),
        page=query.page_number,
        page_size=query.page_size,
        total_count=total_count,
        items=list(items),
    )
