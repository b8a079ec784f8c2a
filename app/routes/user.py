# app/routes/user.py

"""
User Routes.

Admin-only endpoints for user accounts.

Summary
-------
Endpoints include:
  - Create user
  - List users (paged, searchable by login and email)
  - Delete user

All endpoints require the super admin's Basic credentials.
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.auth.permissions import require_admin
from app.configs import file_logger
from app.dependencies import UserQueryListDep, UserServiceDep
from app.models import UserDB
from app.routes.responses import UNAUTHORIZED, VALIDATION_ERROR, not_found
from app.schemas import Paginator, UserCreate, UserResponse
from app.services.list_query import to_paginator

router = APIRouter(
    prefix="/users",
    tags=["👤 Users"],
    dependencies=[Depends(require_admin)],
)

logger = file_logger(getLogger(__name__))


def db_user_to_response(db_user: UserDB) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.

    Returns
    -------
    UserResponse
        Response model without the password hash.
    """
    return UserResponse(
        id=str(db_user.id),
        login=db_user.login,
        email=db_user.email,
        created_at=db_user.created_at,
    )


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description="Create a user account as the super admin.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "login": "johndoe",
                        "email": "johndoe@gmail.com",
                        "createdAt": "2026-10-19T08:30:00.000000Z",
                    },
                },
            },
        },
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
    },
    operation_id="users_create",
)
async def create_user(user: UserCreate, service: UserServiceDep) -> UserResponse:
    """
    Create a new user.

    Parameters
    ----------
    user : UserCreate
        User input payload.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        Created user.

    Raises
    ------
    EmailNotUniqueError
        If the email is taken.
    LoginNotUniqueError
        If the login is taken.
    """
    db_user = await service.create(user)
    return db_user_to_response(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=Paginator[UserResponse],
    summary="List users",
    description=(
        "Page through users. `searchLoginTerm` and `searchEmailTerm` match "
        "case-insensitive substrings and are OR-combined. `pageSize` is capped at 20."
    ),
    responses={400: VALIDATION_ERROR, 401: UNAUTHORIZED},
    operation_id="users_list",
)
async def get_users(query: UserQueryListDep, service: UserServiceDep) -> Paginator[UserResponse]:
    """
    Get a page of users.

    Parameters
    ----------
    query : UserListQuery
        Paging, sorting and search parameters.
    service : UserService
        User service dependency.

    Returns
    -------
    Paginator[UserResponse]
        Page envelope.
    """
    users, total = await service.find_many(query)
    return to_paginator([db_user_to_response(u) for u in users], total, query)


@router.delete(
    "/{user_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete user",
    description="Hard-delete a user by ID.",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHORIZED,
        404: not_found("User"),
    },
    operation_id="users_delete",
)
async def delete_user(user_id: UUID, service: UserServiceDep) -> None:
    """
    Delete user by ID.

    Parameters
    ----------
    user_id : UUID
        User identifier.
    service : UserService
        User service dependency.

    Raises
    ------
    UserNotFoundError
        If the user does not exist.
    """
    await service.delete(user_id)
