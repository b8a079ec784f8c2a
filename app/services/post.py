"""Post service: posts always resolve their blog and snapshot its name."""

from logging import getLogger
from uuid import UUID

from app.configs import file_logger
from app.errors.database import BlogNotFoundError, PostNotFoundError
from app.models import BlogDB, PostDB
from app.repositories.blog import BlogRepository
from app.repositories.post import PostRepository
from app.schemas.post import BlogPostInput, PostInput
from app.services.list_query import ListQuery

logger = file_logger(getLogger(__name__))


class PostService:
    def __init__(self, post_repo: PostRepository, blog_repo: BlogRepository) -> None:
        self.post_repo = post_repo
        self.blog_repo = blog_repo

    async def _resolve_blog(self, blog_id: UUID) -> BlogDB:
        blog = await self.blog_repo.get_by_id(blog_id)
        if not blog:
            raise BlogNotFoundError
        return blog

    async def find_many(
        self,
        query: ListQuery,
        blog_id: UUID | None = None,
    ) -> tuple[list[PostDB], int]:
        """
        Get a page of posts, optionally of one blog.

        Raises:
            BlogNotFoundError: If ``blog_id`` is given and no such blog exists
        """
        if blog_id is not None and not await self.blog_repo.exists(blog_id):
            raise BlogNotFoundError
        return await self.post_repo.find_many(query, blog_id)

    async def find_by_id_or_fail(self, post_id: UUID) -> PostDB:
        post = await self.post_repo.get_by_id(post_id)
        if not post:
            raise PostNotFoundError
        return post

    async def create(self, post: PostInput) -> PostDB:
        return await self.create_for_blog(post.blog_id, post)

    async def create_for_blog(self, blog_id: UUID, post: BlogPostInput) -> PostDB:
        """
        Create a post under a blog.

        Args:
            blog_id: Parent blog ID
            post: Validated post body

        Returns:
            PostDB: Created post with the blog name snapshot

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        blog = await self._resolve_blog(blog_id)
        db_post = await self.post_repo.create(
            blog_id=blog.id,
            blog_name=blog.name,
            title=post.title,
            short_description=post.short_description,
            content=post.content,
        )
        logger.info(f"Post created: {db_post.id} in blog {blog.id}")
        return db_post

    async def update(self, post_id: UUID, post: PostInput) -> PostDB:
        """
        Replace a post and refresh its blog name snapshot.

        Raises:
            PostNotFoundError: If the post does not exist
            BlogNotFoundError: If the new ``blogId`` does not resolve
        """
        db_post = await self.find_by_id_or_fail(post_id)
        blog = await self._resolve_blog(post.blog_id)
        return await self.post_repo.update(
            db_post,
            {
                "blog_id": blog.id,
                "blog_name": blog.name,
                "title": post.title,
                "short_description": post.short_description,
                "content": post.content,
            },
        )

    async def delete(self, post_id: UUID) -> None:
        if not await self.post_repo.delete(post_id):
            raise PostNotFoundError
        logger.info(f"Post deleted: {post_id}")
