"""PostgreSQL implementation of User repository."""

from typing import Any, Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.error import EmailAlreadyRegisteredError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import Email, Preferences, UserId, UserStats, Username
from inkwell.persistence.mappers import preferences_to_json, row_to_user, user_to_dict
from inkwell.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Every update is a single ``UPDATE ... RETURNING`` statement, so counters
    and the avatar list never go through a read-modify-write cycle.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users with one query."""
        stmt = select(users_table).where(users_table.c.id.in_(set(user_ids)))
        result = await self.session.execute(stmt)
        users = [row_to_user(row) for row in result.mappings()]
        return {user.id: user for user in users}

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by normalized email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def add(self, user: User) -> User:
        """Insert a user; the unique index on email rejects duplicates."""
        stmt = insert(users_table).values(**user_to_dict(user))
        try:
            # Savepoint keeps the outer transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn("User insert rejected by unique index", error=str(e.orig))
            raise EmailAlreadyRegisteredError(user.email.root) from e
        return user

    async def _update(self, user_id: UserId, **values: Any) -> Optional[User]:
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(updated_at=func.now(), **values)
            .returning(*users_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[Username] = None,
        email: Optional[Email] = None,
    ) -> Optional[User]:
        """Apply a partial username/email patch."""
        values: dict[str, Any] = {}
        if username is not None:
            values["username"] = username.root
        if email is not None:
            values["email"] = email.root

        try:
            async with self.session.begin_nested():
                return await self._update(user_id, **values)
        except IntegrityError as e:
            raise EmailAlreadyRegisteredError(email.root if email else "") from e

    async def replace_preferences(
        self, user_id: UserId, preferences: Preferences
    ) -> Optional[User]:
        """Overwrite the preferences document."""
        return await self._update(
            user_id, preferences=preferences_to_json(preferences)
        )

    async def push_avatar(self, user_id: UserId, avatar: str) -> Optional[User]:
        """Append to avatars and activate it in the same statement."""
        return await self._update(
            user_id,
            avatars=func.array_append(users_table.c.avatars, avatar),
            avatar=avatar,
        )

    async def set_avatar(self, user_id: UserId, avatar: str) -> Optional[User]:
        """Set the active avatar."""
        return await self._update(user_id, avatar=avatar)

    async def increment_post_count(self, user_id: UserId) -> Optional[UserStats]:
        """Atomically increment the post counter."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(stats_posts=users_table.c.stats_posts + 1, updated_at=func.now())
            .returning(users_table.c.stats_posts, users_table.c.stats_likes)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return UserStats(posts=row.stats_posts, likes=row.stats_likes)

    async def get_stats(self, user_id: UserId) -> Optional[UserStats]:
        """Read the stored counters."""
        stmt = select(users_table.c.stats_posts, users_table.c.stats_likes).where(
            users_table.c.id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return UserStats(posts=row.stats_posts, likes=row.stats_likes)

    async def delete(self, user_id: UserId) -> bool:
        """Delete the user row."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
