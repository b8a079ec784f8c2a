from collections.abc import Awaitable, Callable
from logging import Logger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.configs.settings import DEFAULT_ERROR_MESSAGE
from app.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Server errors keep their detail out of the response body; the
    original message is only logged.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)

        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                f"{detail} for ip: {host(request)} for endpoint {request.url.path}",
                exc_info=exc,
            )
            detail = DEFAULT_ERROR_MESSAGE
        else:
            logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        return ORJSONResponse(content={"detail": detail}, status_code=status_code)

    return handler
