"""Field validation errors rendered as ``{"errorsMessages": [...]}``."""

from logging import getLogger

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.errors.base import BaseAppError
from app.utils.helpers import file_logger, host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Custom validation error carrying one message per offending field."""

    def __init__(
        self,
        detail: str = "Validation Error",
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []


class EmailNotUniqueError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "Email is already taken",
            [{"field": "email", "message": "email should be unique"}],
        )


class LoginNotUniqueError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "Login is already taken",
            [{"field": "login", "message": "login should be unique"}],
        )


def _field_name(loc: tuple[int | str, ...], error_type: str = "") -> str:
    # ("body", "login") -> "login"; ("body",) -> "body"; ("body", 10) -> "body"
    if error_type == "json_invalid" or (len(loc) > 1 and not isinstance(loc[1], str)):
        return str(loc[0]) if loc else "body"
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return parts[0] if parts else "unknown"


def format_request_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """
    Collapse pydantic errors to the first message per field.

    Args:
        exc: The RequestValidationError raised by FastAPI

    Returns:
        list[dict[str, str]]: ``[{"field": ..., "message": ...}, ...]``
    """
    seen: set[str] = set()
    formatted: list[dict[str, str]] = []
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())), error.get("type", ""))
        if field in seen:
            continue
        seen.add(field)
        formatted.append({"field": field, "message": error.get("msg", "Invalid value")})
    return formatted


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request and domain validation errors with the errorsMessages body.

    Args:
        request: The incoming request.
        exc: A RequestValidationError or ValidationError.

    Returns:
        ORJSONResponse with status 400.
    """
    if isinstance(exc, RequestValidationError):
        errors = format_request_errors(exc)
    elif isinstance(exc, ValidationError):
        errors = exc.errors
    else:
        errors = [{"field": "unknown", "message": str(exc)}]

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"errorsMessages": errors},
    )
