from app.routes.auth import router as auth_router
from app.routes.blog import router as blog_router
from app.routes.comment import router as comment_router
from app.routes.post import router as post_router
from app.routes.testing import router as testing_router
from app.routes.user import router as user_router

__all__ = [
    "auth_router",
    "blog_router",
    "comment_router",
    "post_router",
    "testing_router",
    "user_router",
]
