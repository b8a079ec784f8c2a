"""Blog repository for database operations."""

from logging import getLogger

from app.configs import file_logger
from app.models.blog import BlogDB
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogInput
from app.services.list_query import BlogListQuery

logger = file_logger(getLogger(__name__))


class BlogRepository(BaseRepository[BlogDB]):
    """Repository for Blog database operations."""

    model = BlogDB
    sort_columns = {
        "createdAt": BlogDB.created_at,
        "name": BlogDB.name,
        "description": BlogDB.description,
        "websiteUrl": BlogDB.website_url,
    }

    async def create(self, blog: BlogInput) -> BlogDB:
        """
        Create a new blog.

        Args:
            blog: Validated blog body

        Returns:
            BlogDB: Created blog with ``is_membership`` False
        """
        db_blog = BlogDB(
            name=blog.name,
            description=blog.description,
            website_url=blog.website_url,
            is_membership=False,
        )
        db_blog = await self._add_and_refresh(db_blog)
        logger.info(f"Blog created: {db_blog.id}")
        return db_blog

    async def find_many(self, query: BlogListQuery) -> tuple[list[BlogDB], int]:
        """
        Get a page of blogs, optionally filtered by a name substring.

        Args:
            query: Paging, sorting and search parameters

        Returns:
            tuple[list[BlogDB], int]: Page items and total matching blogs
        """
        filters = []
        if query.search_name_term:
            filters.append(BlogDB.name.icontains(query.search_name_term, autoescape=True))
        return await self.find_page(query, *filters)
