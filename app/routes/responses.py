"""OpenAPI response examples shared by the routers."""

from typing import Any

from app.schemas.common import ErrorsMessagesResponse

VALIDATION_ERROR: dict[str, Any] = {
    "description": "Validation error",
    "model": ErrorsMessagesResponse,
    "content": {
        "application/json": {
            "example": {
                "errorsMessages": [
                    {"field": "name", "message": "String should have at most 15 characters"},
                ],
            },
        },
    },
}

UNAUTHORIZED: dict[str, Any] = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "Unauthorized"}}},
}

FORBIDDEN: dict[str, Any] = {
    "description": "Forbidden",
    "content": {"application/json": {"example": {"detail": "Forbidden"}}},
}

RATE_LIMITED: dict[str, Any] = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}


def not_found(entity: str) -> dict[str, Any]:
    return {
        "description": "Not found",
        "content": {"application/json": {"example": {"detail": f"{entity} not found"}}},
    }
