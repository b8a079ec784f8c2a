"""Base repository for database operations."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import SQLModel

from app.errors.database import DatabaseError
from app.services.list_query import ListQuery, SortDirection


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD and paging operations.

    Attributes:
        model: The SQLModel database model type.
        sort_columns: Mapping of API sort field names to model columns.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    sort_columns: Mapping[str, Any] = {}
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        """
        Check if a record exists.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record exists, False otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(1).where(id_column == record_id).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None

    async def find_page(
        self,
        query: ListQuery,
        *filters: ColumnElement[bool],
    ) -> tuple[list[ModelT], int]:
        """
        Get one sorted page of records plus the total matching count.

        Sorting happens before skip/limit and ties are broken by id so
        pages are stable.

        Args:
            query: Paging and sorting parameters
            *filters: Where clauses, AND-combined

        Returns:
            tuple[list[ModelT], int]: Page items and total matching records
        """
        id_column = getattr(self.model, self.id_field)
        sort_column = self.sort_columns.get(query.sort_by, self.sort_columns["createdAt"])
        order = sort_column.asc() if query.sort_direction is SortDirection.ASC else sort_column.desc()

        statement = (
            select(self.model)
            .where(*filters)
            .order_by(order, id_column.asc())
            .offset(query.skip)
            .limit(query.page_size)
        )
        result = await self.session.execute(statement)
        items = list(result.scalars().all())

        count_statement = select(func.count()).select_from(self.model).where(*filters)
        total = (await self.session.execute(count_statement)).scalar()
        return items, total or 0

    async def update(self, record: ModelT, data: Mapping[str, Any]) -> ModelT:
        """
        Apply field values to a loaded record and persist them.

        Args:
            record: Record previously loaded in this session
            data: Field names and new values

        Returns:
            ModelT: Refreshed record
        """
        for key, value in data.items():
            setattr(record, key, value)
        return await self._add_and_refresh(record)

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DatabaseError: If the write violates a constraint or fails
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(detail=f"Failed to save record: {e}") from e
        return record
