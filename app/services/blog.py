"""Blog service."""

from logging import getLogger
from uuid import UUID

from app.configs import file_logger
from app.errors.database import BlogNotFoundError
from app.models import BlogDB
from app.repositories.blog import BlogRepository
from app.schemas.blog import BlogInput
from app.services.list_query import BlogListQuery

logger = file_logger(getLogger(__name__))


class BlogService:
    def __init__(self, blog_repo: BlogRepository) -> None:
        self.blog_repo = blog_repo

    async def find_many(self, query: BlogListQuery) -> tuple[list[BlogDB], int]:
        return await self.blog_repo.find_many(query)

    async def find_by_id_or_fail(self, blog_id: UUID) -> BlogDB:
        blog = await self.blog_repo.get_by_id(blog_id)
        if not blog:
            raise BlogNotFoundError
        return blog

    async def create(self, blog: BlogInput) -> BlogDB:
        return await self.blog_repo.create(blog)

    async def update(self, blog_id: UUID, blog: BlogInput) -> BlogDB:
        """
        Replace a blog's editable fields.

        ``created_at`` and ``is_membership`` are left untouched. Posts keep
        their ``blog_name`` snapshot until they are written again.

        Raises:
            BlogNotFoundError: If no blog has this ID
        """
        db_blog = await self.find_by_id_or_fail(blog_id)
        updated = await self.blog_repo.update(
            db_blog,
            {
                "name": blog.name,
                "description": blog.description,
                "website_url": blog.website_url,
            },
        )
        logger.info(f"Blog updated: {blog_id}")
        return updated

    async def delete(self, blog_id: UUID) -> None:
        if not await self.blog_repo.delete(blog_id):
            raise BlogNotFoundError
        logger.info(f"Blog deleted: {blog_id}")
