# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthServiceDep,
    BlogQueryListDep,
    BlogRepoDep,
    BlogServiceDep,
    CommentQueryListDep,
    CommentRepoDep,
    CommentServiceDep,
    PostQueryListDep,
    PostRepoDep,
    PostServiceDep,
    SessionDep,
    SettingsDep,
    UserQueryListDep,
    UserRepoDep,
    UserServiceDep,
    get_auth_service,
    get_blog_list_query,
    get_comment_list_query,
    get_post_list_query,
    get_user_list_query,
)

__all__ = [
    "AuthServiceDep",
    "BlogQueryListDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CommentQueryListDep",
    "CommentRepoDep",
    "CommentServiceDep",
    "PostQueryListDep",
    "PostRepoDep",
    "PostServiceDep",
    "SessionDep",
    "SettingsDep",
    "UserQueryListDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_auth_service",
    "get_blog_list_query",
    "get_comment_list_query",
    "get_post_list_query",
    "get_user_list_query",
]
