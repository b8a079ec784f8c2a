"""Authentication and authorization module."""

from app.auth.permissions import (
    AdminDep,
    CurrentUserIdDep,
    TokenManagerDep,
    ensure_comment_owner,
    get_token_manager,
    is_admin,
    require_admin,
    require_user_id,
)

__all__ = [
    "AdminDep",
    "CurrentUserIdDep",
    "TokenManagerDep",
    "ensure_comment_owner",
    "get_token_manager",
    "is_admin",
    "require_admin",
    "require_user_id",
]
