# app/dependencies/dependencies.py

"""Application dependencies: sessions, repositories, services and list queries."""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.permissions import TokenManagerDep
from app.configs import Settings, get_settings
from app.configs.settings import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    USER_MAX_PAGE_SIZE,
)
from app.db import get_session
from app.repositories import BlogRepository, CommentRepository, PostRepository, UserRepository
from app.services.auth import AuthService
from app.services.blog import BlogService
from app.services.comment import CommentService
from app.services.list_query import (
    BlogListQuery,
    BlogSortField,
    CommentSortField,
    ListQuery,
    PostSortField,
    SortDirection,
    UserListQuery,
    UserSortField,
    clamp_page_size,
    clean_term,
)
from app.services.post import PostService
from app.services.user import UserService

SessionDep = Annotated[AsyncSession, Depends(get_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


def get_post_repository(session: SessionDep) -> PostRepository:
    return PostRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    return CommentRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]


def get_auth_service(user_repo: UserRepoDep, token_manager: TokenManagerDep) -> AuthService:
    """
    Dependency to get AuthService.

    Parameters
    ----------
    user_repo : UserRepository
        User repository bound to the request session.
    token_manager : TokenManager
        Token issuer built from settings.

    Returns
    -------
    AuthService
        Authentication service.
    """
    return AuthService(user_repo, token_manager)


def get_user_service(user_repo: UserRepoDep) -> UserService:
    return UserService(user_repo)


def get_blog_service(blog_repo: BlogRepoDep) -> BlogService:
    return BlogService(blog_repo)


def get_post_service(post_repo: PostRepoDep, blog_repo: BlogRepoDep) -> PostService:
    return PostService(post_repo, blog_repo)


def get_comment_service(
    comment_repo: CommentRepoDep,
    post_repo: PostRepoDep,
    user_repo: UserRepoDep,
) -> CommentService:
    return CommentService(comment_repo, post_repo, user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]

PageNumberQuery = Annotated[
    int,
    Query(alias="pageNumber", ge=1, description="1-based page number"),
]
PageSizeQuery = Annotated[
    int,
    Query(alias="pageSize", ge=1, le=MAX_PAGE_SIZE, description="Items per page (1-100)"),
]
SortDirectionQuery = Annotated[
    SortDirection,
    Query(alias="sortDirection", description="Sort direction"),
]


def get_blog_list_query(
    page_number: PageNumberQuery = DEFAULT_PAGE_NUMBER,
    page_size: PageSizeQuery = DEFAULT_PAGE_SIZE,
    sort_by: Annotated[BlogSortField, Query(alias="sortBy")] = "createdAt",
    sort_direction: SortDirectionQuery = SortDirection.DESC,
    search_name_term: Annotated[
        str | None,
        Query(alias="searchNameTerm", description="Case-insensitive name substring"),
    ] = None,
) -> BlogListQuery:
    """
    Dependency to construct `BlogListQuery` from query parameters.

    Returns
    -------
    BlogListQuery
        Aggregated query parameters object.
    """
    return BlogListQuery(
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
        search_name_term=clean_term(search_name_term),
    )


def get_post_list_query(
    page_number: PageNumberQuery = DEFAULT_PAGE_NUMBER,
    page_size: PageSizeQuery = DEFAULT_PAGE_SIZE,
    sort_by: Annotated[PostSortField, Query(alias="sortBy")] = "createdAt",
    sort_direction: SortDirectionQuery = SortDirection.DESC,
) -> ListQuery:
    return ListQuery(
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


def get_comment_list_query(
    page_number: PageNumberQuery = DEFAULT_PAGE_NUMBER,
    page_size: PageSizeQuery = DEFAULT_PAGE_SIZE,
    sort_by: Annotated[CommentSortField, Query(alias="sortBy")] = "createdAt",
    sort_direction: SortDirectionQuery = SortDirection.DESC,
) -> ListQuery:
    return ListQuery(
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


def get_user_list_query(
    page_number: PageNumberQuery = DEFAULT_PAGE_NUMBER,
    page_size: Annotated[
        int,
        Query(alias="pageSize", ge=1, description="Items per page, capped at 20"),
    ] = DEFAULT_PAGE_SIZE,
    sort_by: Annotated[UserSortField, Query(alias="sortBy")] = "createdAt",
    sort_direction: SortDirectionQuery = SortDirection.DESC,
    search_login_term: Annotated[
        str | None,
        Query(alias="searchLoginTerm", description="Case-insensitive login substring"),
    ] = None,
    search_email_term: Annotated[
        str | None,
        Query(alias="searchEmailTerm", description="Case-insensitive email substring"),
    ] = None,
) -> UserListQuery:
    """
    Dependency to construct `UserListQuery` from query parameters.

    ``pageSize`` above the user cap is clamped rather than rejected.

    Returns
    -------
    UserListQuery
        Aggregated query parameters object.
    """
    return UserListQuery(
        page_number=page_number,
        page_size=clamp_page_size(page_size, USER_MAX_PAGE_SIZE),
        sort_by=sort_by,
        sort_direction=sort_direction,
        search_login_term=clean_term(search_login_term),
        search_email_term=clean_term(search_email_term),
    )


BlogQueryListDep = Annotated[BlogListQuery, Depends(get_blog_list_query)]
PostQueryListDep = Annotated[ListQuery, Depends(get_post_list_query)]
CommentQueryListDep = Annotated[ListQuery, Depends(get_comment_list_query)]
UserQueryListDep = Annotated[UserListQuery, Depends(get_user_list_query)]

