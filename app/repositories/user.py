"""User repository for database operations."""

from typing import cast

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql.expression import ColumnElement

from app.errors.database import DatabaseError
from app.errors.validation import EmailNotUniqueError, LoginNotUniqueError
from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.services.list_query import UserListQuery

# Index names come from PostgreSQL, table.column pairs from SQLite.
_UNIQUE_MARKERS = {
    "email": ("ix_users_email", "users.email"),
    "login": ("ix_users_login", "users.login"),
}


def conflicting_field(error_msg: str) -> str | None:
    """
    Name the users column behind a unique violation.

    Only the first line of the driver message is inspected: the
    PostgreSQL DETAIL line echoes the offending value, which may itself
    read like a column name.
    """
    head = error_msg.strip().splitlines()[0].lower() if error_msg.strip() else ""
    for field, markers in _UNIQUE_MARKERS.items():
        if any(marker in head for marker in markers):
            return field
    return None


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Login lookups are exact; email lookups compare lower-cased values,
    matching how emails are stored.
    """

    model = UserDB
    sort_columns = {
        "createdAt": UserDB.created_at,
        "login": UserDB.login,
        "email": UserDB.email,
    }

    async def create(self, login: str, email: str, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            login: Unique login
            email: Unique email, lower-cased
            password_hash: bcrypt hash of the password

        Returns:
            UserDB: Created user database model

        Raises:
            EmailNotUniqueError: If the email already exists
            LoginNotUniqueError: If the login already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(login=login, email=email.lower(), password_hash=password_hash)
        try:
            self.session.add(db_user)
            await self.session.flush()
            await self.session.refresh(db_user)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            field = conflicting_field(error_msg)
            if field == "email":
                raise EmailNotUniqueError from e
            if field == "login":
                raise LoginNotUniqueError from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        return db_user

    async def get_by_login(self, login: str) -> UserDB | None:
        """
        Get user by exact, case-sensitive login.

        Args:
            login: Login to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.login == login)),
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email, ignoring case.

        Args:
            email: Email to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.email == email.lower())),
        )
        return result.scalar_one_or_none()

    async def get_by_login_or_email(self, login_or_email: str) -> UserDB | None:
        """
        Get user whose login equals the value or whose email matches it.

        Args:
            login_or_email: Login (exact) or email (case-insensitive)

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB)
            .where(
                or_(
                    UserDB.login == login_or_email,
                    UserDB.email == login_or_email.lower(),
                ),
            )
            .limit(1),
        )
        return result.scalar_one_or_none()

    async def find_many(self, query: UserListQuery) -> tuple[list[UserDB], int]:
        """
        Get a page of users filtered by login or email substrings.

        Present search terms OR-combine; with no terms every user matches.

        Args:
            query: Paging, sorting and search parameters

        Returns:
            tuple[list[UserDB], int]: Page items and total matching users
        """
        terms: list[ColumnElement[bool]] = []
        if query.search_login_term:
            terms.append(UserDB.login.icontains(query.search_login_term, autoescape=True))
        if query.search_email_term:
            terms.append(UserDB.email.icontains(query.search_email_term, autoescape=True))
        filters = [or_(*terms)] if terms else []
        return await self.find_page(query, *filters)
