# app/main.py

"""Blog Platform API - blogs, posts, comments and users over FastAPI."""

from logging import getLogger

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.configs import file_logger, settings
from app.errors import (
    BaseAppError,
    DatabaseError,
    ForbiddenError,
    PasswordHashingError,
    UserAuthenticationError,
    ValidationError,
    auth_exception_handler,
    create_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from app.managers import limiter, rate_limit_exceeded_handler
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.routes import (
    auth_router,
    blog_router,
    comment_router,
    post_router,
    testing_router,
    user_router,
)
from app.schemas import HealthCheckResponse
from app.utils.helpers import to_iso, utc_now

logger = file_logger(getLogger(__name__))

app = FastAPI(
    title=settings.APP_NAME,
    description="Blogging platform REST API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    auth_router,
    user_router,
    blog_router,
    post_router,
    comment_router,
]
if settings.ENABLE_TESTING_ROUTES:
    routes.append(testing_router)

_ = [app.include_router(router) for router in routes]

errors = [
    (RequestValidationError, validation_exception_handler),
    (ValidationError, validation_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (ForbiddenError, auth_exception_handler),
    (DatabaseError, database_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (BaseAppError, create_exception_handler(logger)),
    (Exception, create_exception_handler(logger)),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "version": "1.0.0",
                        "environment": "production",
                        "timestamp": "2026-10-19T08:30:00.000000Z",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Service status, version, deployment environment and server time.
    """
    return HealthCheckResponse(
        status="ok",
        version=app.version,
        environment=settings.ENVIRONMENT,
        timestamp=to_iso(utc_now()),
    )
