# app/routes/post.py

"""
Post Routes.

Summary
-------
Endpoints include:
  - List posts / get post by id (public)
  - Create, update and delete posts (super admin)
  - List comments of a post (public)
  - Comment on a post (bearer token)
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.auth.permissions import CurrentUserIdDep, require_admin
from app.configs import file_logger
from app.dependencies import CommentQueryListDep, CommentServiceDep, PostQueryListDep, PostServiceDep
from app.models import PostDB
from app.routes.comment import db_comment_to_response
from app.routes.responses import UNAUTHORIZED, VALIDATION_ERROR, not_found
from app.schemas import CommentInput, CommentResponse, Paginator, PostInput, PostResponse
from app.services.list_query import to_paginator

router = APIRouter(prefix="/posts", tags=["📰 Posts"])

logger = file_logger(getLogger(__name__))

POST_EXAMPLE = {
    "id": "223e4567-e89b-12d3-a456-426614174000",
    "title": "What to pack for Bali",
    "shortDescription": "A practical packing list",
    "content": "Sunscreen, sandals and a light rain jacket.",
    "blogId": "123e4567-e89b-12d3-a456-426614174000",
    "blogName": "Bali Travel",
    "createdAt": "2026-10-19T08:30:00.000000Z",
}


def db_post_to_response(db_post: PostDB) -> PostResponse:
    """
    Convert a `PostDB` instance to `PostResponse`.

    Parameters
    ----------
    db_post : PostDB
        Database post entity.

    Returns
    -------
    PostResponse
        Response model including the blog name snapshot.
    """
    return PostResponse(
        id=str(db_post.id),
        title=db_post.title,
        short_description=db_post.short_description,
        content=db_post.content,
        blog_id=str(db_post.blog_id),
        blog_name=db_post.blog_name,
        created_at=db_post.created_at,
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=Paginator[PostResponse],
    summary="List posts",
    description="Page through all posts.",
    responses={400: VALIDATION_ERROR},
    operation_id="posts_list",
)
async def get_posts(query: PostQueryListDep, service: PostServiceDep) -> Paginator[PostResponse]:
    """
    Get a page of posts.

    Parameters
    ----------
    query : ListQuery
        Paging and sorting parameters.
    service : PostService
        Post service dependency.

    Returns
    -------
    Paginator[PostResponse]
        Page envelope.
    """
    posts, total = await service.find_many(query)
    return to_paginator([db_post_to_response(p) for p in posts], total, query)


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    summary="Get post by ID",
    responses={
        200: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        400: VALIDATION_ERROR,
        404: not_found("Post"),
    },
    operation_id="posts_get_by_id",
)
async def get_post(post_id: UUID, service: PostServiceDep) -> PostResponse:
    """
    Get post by ID.

    Raises
    ------
    PostNotFoundError
        If the post does not exist.
    """
    return db_post_to_response(await service.find_by_id_or_fail(post_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=PostResponse,
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    summary="Create a new post",
    description="Create a post in an existing blog; `blogName` is copied from the blog.",
    responses={
        201: {"content": {"application/json": {"example": POST_EXAMPLE}}},
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
        404: not_found("Blog"),
    },
    operation_id="posts_create",
)
async def create_post(post: PostInput, service: PostServiceDep) -> PostResponse:
    """
    Create a new post.

    Parameters
    ----------
    post : PostInput
        Post input payload including ``blogId``.
    service : PostService
        Post service dependency.

    Returns
    -------
    PostResponse
        Created post.

    Raises
    ------
    BlogNotFoundError
        If ``blogId`` does not resolve.
    """
    return db_post_to_response(await service.create(post))


@router.put(
    "/{post_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
    summary="Update post",
    description="Replace a post; `blogId` is re-resolved and `blogName` refreshed.",
    responses={
        204: {"description": "No Content"},
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
        404: not_found("Post"),
    },
    operation_id="posts_update",
)
async def update_post(post_id: UUID, post: PostInput, service: PostServiceDep) -> None:
    """
    Update post by ID.

    Raises
    ------
    PostNotFoundError
        If the post does not exist.
    BlogNotFoundError
        If ``blogId`` does not resolve.
    """
    await service.update(post_id, post)


@router.delete(
    "/{post_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
    summary="Delete post",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHORIZED,
        404: not_found("Post"),
    },
    operation_id="posts_delete",
)
async def delete_post(post_id: UUID, service: PostServiceDep) -> None:
    """
    Delete post by ID.

    Raises
    ------
    PostNotFoundError
        If the post does not exist.
    """
    await service.delete(post_id)


@router.get(
    "/{post_id}/comments",
    response_class=ORJSONResponse,
    response_model=Paginator[CommentResponse],
    summary="List comments of a post",
    responses={400: VALIDATION_ERROR, 404: not_found("Post")},
    operation_id="posts_list_comments",
)
async def get_post_comments(
    post_id: UUID,
    query: CommentQueryListDep,
    service: CommentServiceDep,
) -> Paginator[CommentResponse]:
    """
    Get a page of comments of a post.

    Parameters
    ----------
    post_id : UUID
        Post identifier.
    query : ListQuery
        Paging and sorting parameters.
    service : CommentService
        Comment service dependency.

    Returns
    -------
    Paginator[CommentResponse]
        Page envelope.

    Raises
    ------
    PostNotFoundError
        If the post does not exist.
    """
    comments, total = await service.find_many_by_post(post_id, query)
    return to_paginator([db_comment_to_response(c) for c in comments], total, query)


@router.post(
    "/{post_id}/comments",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    status_code=HTTP_201_CREATED,
    summary="Comment on a post",
    description="Create a comment as the bearer token's owner.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "323e4567-e89b-12d3-a456-426614174000",
                        "content": "Great guide, the packing list saved my trip.",
                        "commentatorInfo": {
                            "userId": "423e4567-e89b-12d3-a456-426614174000",
                            "userLogin": "johndoe",
                        },
                        "createdAt": "2026-10-19T08:30:00.000000Z",
                    },
                },
            },
        },
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
        404: not_found("Post"),
    },
    operation_id="posts_create_comment",
)
async def create_post_comment(
    user_id: CurrentUserIdDep,
    post_id: UUID,
    comment: CommentInput,
    service: CommentServiceDep,
) -> CommentResponse:
    """
    Comment on a post.

    Parameters
    ----------
    user_id : UUID
        Requesting user from the bearer token.
    post_id : UUID
        Post identifier.
    comment : CommentInput
        Comment payload.
    service : CommentService
        Comment service dependency.

    Returns
    -------
    CommentResponse
        Created comment with commentator info.
    """
    db_comment = await service.create(post_id, user_id, comment.content)
    return db_comment_to_response(db_comment)
