"""Authorization gates: admin HTTP Basic, user bearer token and comment ownership."""

from logging import getLogger
from secrets import compare_digest
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader, HTTPBasic, HTTPBasicCredentials

from app.configs import Settings, file_logger, get_settings
from app.errors.auth import ForbiddenError, UserAuthenticationError
from app.managers.token_manager import TokenManager
from app.models import CommentDB
from app.services.auth import resolve_user_id
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))

basic_scheme = HTTPBasic(auto_error=False, description="Super admin credentials")
bearer_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Access token as `Bearer <token>`",
)


def get_token_manager(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenManager:
    """
    Build the token manager from the injected settings.

    Parameters
    ----------
    settings : Settings
        Application settings.

    Returns
    -------
    TokenManager
        Token issuer and verifier.
    """
    return TokenManager.from_settings(settings)


TokenManagerDep = Annotated[TokenManager, Depends(get_token_manager)]


def is_admin(credentials: HTTPBasicCredentials | None, settings: Settings) -> bool:
    """
    Check Basic credentials against the configured super admin.

    Both parts are always compared in constant time.
    """
    if credentials is None:
        return False
    username_ok = compare_digest(
        credentials.username.encode(),
        settings.ADMIN_USERNAME.encode(),
    )
    password_ok = compare_digest(
        credentials.password.encode(),
        settings.ADMIN_PASSWORD.get_secret_value().encode(),
    )
    return username_ok and password_ok


async def require_admin(
    request: Request,
    credentials: Annotated[HTTPBasicCredentials | None, Depends(basic_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """
    Dependency that requires the super admin's Basic credentials.

    Parameters
    ----------
    request : Request
        Current request context.
    credentials : HTTPBasicCredentials | None
        Decoded Basic credentials, None when the header is absent.
    settings : Settings
        Application settings.

    Raises
    ------
    UserAuthenticationError
        If the header is missing, malformed or does not match.
    """
    if not is_admin(credentials, settings):
        logger.warning(f"Admin authentication failed for ip: {host(request)}")
        raise UserAuthenticationError


async def require_user_id(
    authorization: Annotated[str | None, Depends(bearer_header)],
    token_manager: TokenManagerDep,
) -> UUID:
    """
    Dependency that resolves the requesting user from a bearer token.

    Parameters
    ----------
    authorization : str | None
        Raw ``Authorization`` header.
    token_manager : TokenManager
        Access token verifier.

    Returns
    -------
    UUID
        The token's ``userId``.

    Raises
    ------
    UserAuthenticationError
        If the header or token is invalid.
    """
    return resolve_user_id(authorization, token_manager)


def ensure_comment_owner(comment: CommentDB, user_id: UUID) -> None:
    """
    Allow only the comment's author to change it.

    Args:
        comment: Existing comment
        user_id: Requesting user

    Raises:
        ForbiddenError: If the requester did not write the comment
    """
    if comment.user_id != user_id:
        logger.warning(f"User {user_id} denied access to comment {comment.id}")
        raise ForbiddenError


AdminDep = Annotated[None, Depends(require_admin)]
CurrentUserIdDep = Annotated[UUID, Depends(require_user_id)]
