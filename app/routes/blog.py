# app/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints and listing/search for blogs, plus the posts of
a blog.

Summary
-------
Endpoints include:
  - List blogs (paged, searchable by name) / get blog by id (public)
  - Create, update and delete blogs (super admin)
  - List posts of a blog (public)
  - Create a post in a blog (super admin)
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.auth.permissions import require_admin
from app.configs import file_logger
from app.dependencies import BlogQueryListDep, BlogServiceDep, PostQueryListDep, PostServiceDep
from app.models import BlogDB
from app.routes.post import POST_EXAMPLE, db_post_to_response
from app.routes.responses import UNAUTHORIZED, VALIDATION_ERROR, not_found
from app.schemas import BlogInput, BlogPostInput, BlogResponse, Paginator, PostResponse
from app.services.list_query import to_paginator

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "name": "Bali Travel",
    "description": "Guides and stories from the island",
    "websiteUrl": "https://bali-travel.example.com",
    "createdAt": "2026-10-19T08:30:00.000000Z",
    "isMembership": False,
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse(
        id=str(db_blog.id),
        name=db_blog.name,
        description=db_blog.description,
        website_url=db_blog.website_url,
        created_at=db_blog.created_at,
        is_membership=db_blog.is_membership,
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=Paginator[BlogResponse],
    summary="List blogs",
    description="Page through blogs; `searchNameTerm` matches a case-insensitive name substring.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "pagesCount": 1,
                        "page": 1,
                        "pageSize": 10,
                        "totalCount": 1,
                        "items": [BLOG_EXAMPLE],
                    },
                },
            },
        },
        400: VALIDATION_ERROR,
    },
    operation_id="blogs_list",
)
async def get_blogs(query: BlogQueryListDep, service: BlogServiceDep) -> Paginator[BlogResponse]:
    """
    Get a page of blogs.

    Parameters
    ----------
    query : BlogListQuery
        Paging, sorting and search parameters.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    Paginator[BlogResponse]
        Page envelope.
    """
    blogs, total = await service.find_many(query)
    return to_paginator([db_blog_to_response(b) for b in blogs], total, query)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: VALIDATION_ERROR,
        404: not_found("Blog"),
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, service: BlogServiceDep) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Blog data.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    """
    return db_blog_to_response(await service.find_by_id_or_fail(blog_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    summary="Create a new blog",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
    },
    operation_id="blogs_create",
)
async def create_blog(blog: BlogInput, service: BlogServiceDep) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogInput
        Blog input payload.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Created blog data.
    """
    return db_blog_to_response(await service.create(blog))


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
    summary="Update blog",
    responses={
        204: {"description": "No Content"},
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
        404: not_found("Blog"),
    },
    operation_id="blogs_update",
)
async def update_blog(blog_id: UUID, blog: BlogInput, service: BlogServiceDep) -> None:
    """
    Update blog by ID.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    """
    await service.update(blog_id, blog)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
    summary="Delete blog",
    description="Delete a blog together with its posts and their comments.",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHORIZED,
        404: not_found("Blog"),
    },
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: UUID, service: BlogServiceDep) -> None:
    """
    Delete blog by ID.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    """
    await service.delete(blog_id)


@router.get(
    "/{blog_id}/posts",
    response_class=ORJSONResponse,
    response_model=Paginator[PostResponse],
    summary="List posts of a blog",
    responses={400: VALIDATION_ERROR, 404: not_found("Blog")},
    operation_id="blogs_list_posts",
)
async def get_blog_posts(
    blog_id: UUID,
    query: PostQueryListDep,
    service: PostServiceDep,
) -> Paginator[PostResponse]:
    """
    Get a page of posts of a blog.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    query : ListQuery
        Paging and sorting parameters.
    service : PostService
        Post service dependency.

    Returns
    -------
    Paginator[PostResponse]
        Page envelope.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    """
    posts, total = await service.find_many(query, blog_id=blog_id)
    return to_paginator([db_post_to_response(p) for p in posts], total, query)


@router.post(
    "/{blog_id}/posts",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    summary="Create a post in a blog",
    responses={
        201: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
        404: not_found("Blog"),
    },
    operation_id="blogs_create_post",
)
async def create_blog_post(
    blog_id: UUID,
    post: BlogPostInput,
    service: PostServiceDep,
) -> PostResponse:
    """
    Create a post in the blog from the path.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    post : BlogPostInput
        Post input payload.
    service : PostService
        Post service dependency.

    Returns
    -------
    PostResponse
        Created post.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    """
    return db_post_to_response(await service.create_for_blog(blog_id, post))
