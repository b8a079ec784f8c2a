"""Comment repository for database operations."""

from uuid import UUID

from app.models.comment import CommentDB
from app.repositories.base import BaseRepository
from app.services.list_query import ListQuery


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for Comment database operations."""

    model = CommentDB
    sort_columns = {"createdAt": CommentDB.created_at}

    async def create(
        self,
        *,
        post_id: UUID,
        user_id: UUID,
        user_login: str,
        content: str,
    ) -> CommentDB:
        """
        Create a new comment on a post.

        Args:
            post_id: Commented post, already resolved
            user_id: Commentator ID
            user_login: Commentator login snapshot
            content: Comment text

        Returns:
            CommentDB: Created comment
        """
        db_comment = CommentDB(
            post_id=post_id,
            user_id=user_id,
            user_login=user_login,
            content=content,
        )
        return await self._add_and_refresh(db_comment)

    async def find_many_by_post(
        self,
        post_id: UUID,
        query: ListQuery,
    ) -> tuple[list[CommentDB], int]:
        """
        Get a page of comments of one post.

        Args:
            post_id: Post ID
            query: Paging and sorting parameters

        Returns:
            tuple[list[CommentDB], int]: Page items and total comments of the post
        """
        return await self.find_page(query, CommentDB.post_id == post_id)
