"""
Database initialization and verification script.

Creates missing tables and verifies connectivity. Run with
``python -m app.db.init_db``; production schemas are managed by
``alembic upgrade head``.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from app.db.database import close_db, init_db
from app.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


async def main() -> None:
    """Verify database connection and create tables."""
    logger.info("Verifying database connection...")
    try:
        await init_db()
        logger.info("Database ready!")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio_run(main())
