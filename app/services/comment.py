"""Comment service: existence checks run before the ownership check."""

from logging import getLogger
from uuid import UUID

from app.auth.permissions import ensure_comment_owner
from app.configs import file_logger
from app.errors.database import CommentNotFoundError, PostNotFoundError, UserNotFoundError
from app.models import CommentDB
from app.repositories.comment import CommentRepository
from app.repositories.post import PostRepository
from app.repositories.user import UserRepository
from app.services.list_query import ListQuery

logger = file_logger(getLogger(__name__))


class CommentService:
    def __init__(
        self,
        comment_repo: CommentRepository,
        post_repo: PostRepository,
        user_repo: UserRepository,
    ) -> None:
        self.comment_repo = comment_repo
        self.post_repo = post_repo
        self.user_repo = user_repo

    async def find_many_by_post(
        self,
        post_id: UUID,
        query: ListQuery,
    ) -> tuple[list[CommentDB], int]:
        """
        Get a page of comments of a post.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        if not await self.post_repo.exists(post_id):
            raise PostNotFoundError
        return await self.comment_repo.find_many_by_post(post_id, query)

    async def find_by_id_or_fail(self, comment_id: UUID) -> CommentDB:
        comment = await self.comment_repo.get_by_id(comment_id)
        if not comment:
            raise CommentNotFoundError
        return comment

    async def create(self, post_id: UUID, user_id: UUID, content: str) -> CommentDB:
        """
        Comment on a post as the given user.

        Args:
            post_id: Commented post
            user_id: Requesting user from the bearer token
            content: Validated comment text

        Returns:
            CommentDB: Created comment with the user's login snapshot

        Raises:
            PostNotFoundError: If the post does not exist
            UserNotFoundError: If the user was deleted after the token was issued
        """
        if not await self.post_repo.exists(post_id):
            raise PostNotFoundError
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise UserNotFoundError
        db_comment = await self.comment_repo.create(
            post_id=post_id,
            user_id=user.id,
            user_login=user.login,
            content=content,
        )
        logger.info(f"Comment created: {db_comment.id} on post {post_id}")
        return db_comment

    async def update(self, comment_id: UUID, user_id: UUID, content: str) -> CommentDB:
        """
        Edit a comment's text.

        Raises:
            CommentNotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        comment = await self.find_by_id_or_fail(comment_id)
        ensure_comment_owner(comment, user_id)
        return await self.comment_repo.update(comment, {"content": content})

    async def delete(self, comment_id: UUID, user_id: UUID) -> None:
        """
        Delete a comment.

        Raises:
            CommentNotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        comment = await self.find_by_id_or_fail(comment_id)
        ensure_comment_owner(comment, user_id)
        await self.comment_repo.delete(comment.id)
        logger.info(f"Comment deleted: {comment_id}")
