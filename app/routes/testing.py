"""Test-support routes, mounted only when ``ENABLE_TESTING_ROUTES`` is set."""

from logging import getLogger

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_204_NO_CONTENT

from app.configs import file_logger
from app.db import clear_all_data
from app.dependencies import SessionDep

router = APIRouter(prefix="/testing", tags=["🧪 Testing"])

logger = file_logger(getLogger(__name__))


@router.delete(
    "/all-data",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete all data",
    description="Remove every user, blog, post and comment.",
    responses={204: {"description": "No Content"}},
    operation_id="testing_delete_all_data",
)
async def delete_all_data(session: SessionDep) -> None:
    """Wipe the database."""
    await clear_all_data(session)
