"""Post repository for database operations."""

from uuid import UUID

from app.models.post import PostDB
from app.repositories.base import BaseRepository
from app.services.list_query import ListQuery


class PostRepository(BaseRepository[PostDB]):
    """Repository for Post database operations."""

    model = PostDB
    sort_columns = {
        "createdAt": PostDB.created_at,
        "title": PostDB.title,
        "shortDescription": PostDB.short_description,
        "content": PostDB.content,
        "blogId": PostDB.blog_id,
        "blogName": PostDB.blog_name,
    }

    async def create(
        self,
        *,
        blog_id: UUID,
        blog_name: str,
        title: str,
        short_description: str,
        content: str,
    ) -> PostDB:
        """
        Create a new post under a blog.

        Args:
            blog_id: Parent blog ID, already resolved
            blog_name: Parent blog name snapshot
            title: Post title
            short_description: Post short description
            content: Post content

        Returns:
            PostDB: Created post
        """
        db_post = PostDB(
            blog_id=blog_id,
            blog_name=blog_name,
            title=title,
            short_description=short_description,
            content=content,
        )
        return await self._add_and_refresh(db_post)

    async def find_many(
        self,
        query: ListQuery,
        blog_id: UUID | None = None,
    ) -> tuple[list[PostDB], int]:
        """
        Get a page of posts, optionally scoped to one blog.

        Args:
            query: Paging and sorting parameters
            blog_id: Only posts of this blog when given

        Returns:
            tuple[list[PostDB], int]: Page items and total matching posts
        """
        filters = [PostDB.blog_id == blog_id] if blog_id is not None else []
        return await self.find_page(query, *filters)
