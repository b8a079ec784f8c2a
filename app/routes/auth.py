"""Authentication routes for login, self-registration and the current user."""

from logging import getLogger

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_204_NO_CONTENT

from app.auth.permissions import CurrentUserIdDep
from app.configs import file_logger, settings
from app.dependencies import AuthServiceDep
from app.managers import limiter
from app.routes.responses import RATE_LIMITED, UNAUTHORIZED, VALIDATION_ERROR, not_found
from app.schemas.auth import LoginRequest, MeResponse, Token
from app.schemas.user import UserCreate

router = APIRouter(prefix="/auth", tags=["🔐 Auth"])

logger = file_logger(getLogger(__name__))


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate with login or email and password to obtain an access token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."},
                },
            },
        },
        400: VALIDATION_ERROR,
        401: UNAUTHORIZED,
        429: RATE_LIMITED,
    },
    operation_id="auth_login",
)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login_for_access_token(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> Token:
    """
    Login with login (or email) and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    credentials : LoginRequest
        ``loginOrEmail`` and ``password``.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    Token
        Access token object.

    Raises
    ------
    InvalidCredentialsError
        If the user is unknown or the password is wrong.
    """
    return await auth_service.login(
        credentials.login_or_email,
        credentials.password.get_secret_value(),
    )


@router.post(
    "/registration",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Register a new user",
    description="Create a user account. Login and email must be unused.",
    responses={
        204: {"description": "No Content"},
        400: VALIDATION_ERROR,
    },
    operation_id="auth_registration",
)
async def register_user(user_create: UserCreate, auth_service: AuthServiceDep) -> None:
    """
    Register a new user.

    Parameters
    ----------
    user_create : UserCreate
        Registration data.
    auth_service : AuthService
        Authentication service dependency.

    Raises
    ------
    EmailNotUniqueError
        If the email is taken.
    LoginNotUniqueError
        If the login is taken.
    """
    await auth_service.register(user_create)


@router.get(
    "/me",
    response_class=ORJSONResponse,
    response_model=MeResponse,
    summary="Get current user",
    description="Return the profile of the bearer token's owner.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "userId": "123e4567-e89b-12d3-a456-426614174000",
                        "login": "johndoe",
                        "email": "johndoe@gmail.com",
                    },
                },
            },
        },
        401: UNAUTHORIZED,
        404: not_found("User"),
    },
    operation_id="auth_me",
)
async def read_me(user_id: CurrentUserIdDep, auth_service: AuthServiceDep) -> MeResponse:
    """
    Get the current user's profile.

    Parameters
    ----------
    user_id : UUID
        Requesting user from the bearer token.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    MeResponse
        ``userId``, ``login`` and ``email``.
    """
    return await auth_service.me(user_id)
