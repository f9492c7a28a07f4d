"""Post domain service."""

import logfire

from inkwell.domain.model.post import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId, UserId

from .base import Service


def split_list_field(raw: str | None) -> list[str]:
    """Split a comma separated form value into trimmed, non-blank items.

    ``None`` and ``""`` give an empty list, never ``[""]``.
    """
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Persist a new post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.add(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def count_posts_by_author(self, author_id: UserId) -> int:
        """Live count of posts owned by a user."""
        with logfire.span("post_service.count_posts_by_author", author_id=str(author_id)):
            return await self.post_repository.count_by_author(author_id)
