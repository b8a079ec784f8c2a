# app/routes/comment.py

"""
Comment Routes.

Reading is public; editing and deleting are limited to the comment's author.
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_204_NO_CONTENT

from app.auth.permissions import CurrentUserIdDep
from app.configs import file_logger
from app.dependencies import CommentServiceDep
from app.models import CommentDB
from app.routes.responses import FORBIDDEN, UNAUTHORIZED, VALIDATION_ERROR, not_found
from app.schemas import CommentatorInfo, CommentInput, CommentResponse

router = APIRouter(prefix="/comments", tags=["💬 Comments"])

logger = file_logger(getLogger(__name__))


def db_comment_to_response(db_comment: CommentDB) -> CommentResponse:
    """
    Convert a `CommentDB` instance to `CommentResponse`.

    Parameters
    ----------
    db_comment : CommentDB
        Database comment entity.

    Returns
    -------
    CommentResponse
        Response model with nested commentator info.
    """
    return CommentResponse(
        id=str(db_comment.id),
        content=db_comment.content,
        commentator_info=CommentatorInfo(
            user_id=str(db_comment.user_id),
            user_login=db_comment.user_login,
        ),
        created_at=db_comment.created_at,
    )


@router.get(
    "/{comment_id}",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    summary="Get comment by ID",
    responses={400: VALIDATION_ERROR, 404: not_found("Comment")},
    operation_id="comments_get_by_id",
)
async def get_comment(comment_id: UUID, service: CommentServiceDep) -> CommentResponse:
    """
    Get comment by ID.

    Raises
    ------
    CommentNotFoundError
        If the comment does not exist.
    """
    return db_comment_to_response(await service.find_by_id_or_fail(comment_id))


@router.put(
    "/{comment_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Update comment",
    description="Edit a comment's text. Only its author may do this.",
    responses={
        204: {"description": "No Content"},
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
        403: FORBIDDEN,
        404: not_found("Comment"),
    },
    operation_id="comments_update",
)
async def update_comment(
    user_id: CurrentUserIdDep,
    comment_id: UUID,
    comment: CommentInput,
    service: CommentServiceDep,
) -> None:
    """
    Update comment by ID.

    Parameters
    ----------
    user_id : UUID
        Requesting user from the bearer token.
    comment_id : UUID
        Comment identifier.
    comment : CommentInput
        New comment text.
    service : CommentService
        Comment service dependency.

    Raises
    ------
    CommentNotFoundError
        If the comment does not exist.
    ForbiddenError
        If the requester is not the author.
    """
    await service.update(comment_id, user_id, comment.content)


@router.delete(
    "/{comment_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete comment",
    description="Delete a comment. Only its author may do this.",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHORIZED,
        403: FORBIDDEN,
        404: not_found("Comment"),
    },
    operation_id="comments_delete",
)
async def delete_comment(
    user_id: CurrentUserIdDep,
    comment_id: UUID,
    service: CommentServiceDep,
) -> None:
    """
    Delete comment by ID.

    Raises
    ------
    CommentNotFoundError
        If the comment does not exist.
    ForbiddenError
        If the requester is not the author.
    """
    await service.delete(comment_id, user_id)
