"""In-memory post repository for testing."""

from typing import List, Optional

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> List[Post]:
        """All posts, newest first (later inserts win ties)."""
        posts = list(reversed(self._posts.values()))
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by author."""
        return sum(1 for p in self._posts.values() if p.author_id == author_id)

    async def add(self, post: Post) -> Post:
        """Insert a post."""
        self._posts[post.id] = post
        return post
