"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId, UserId
from inkwell.persistence.mappers import post_to_dict, row_to_post
from inkwell.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post(row) if row else None

    async def find_all(self) -> List[Post]:
        """All posts, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(
                desc(posts_table.c.created_at), desc(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row) for row in result.mappings()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count posts by author."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def add(self, post: Post) -> Post:
        """Insert a post."""
        with logfire.span("post_repository.add", post_id=str(post.id)):
            await self.session.execute(insert(posts_table).values(**post_to_dict(post)))
            return post
