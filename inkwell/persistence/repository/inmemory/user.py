"""In-memory user repository for testing."""

from typing import Any, Optional

from inkwell.domain.error import EmailAlreadyRegisteredError
from inkwell.domain.model.common import utcnow
from inkwell.domain.model.user import User
from inkwell.domain.repository.user import UserRepository
from inkwell.domain.value import Email, Preferences, UserId, UserStats, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same unique email rule as the database index.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _email_taken(self, email: Email, exclude: UserId | None = None) -> bool:
        return any(
            user.email == email and user.id != exclude for user in self._users.values()
        )

    def _update(self, user_id: UserId, **changes: Any) -> Optional[User]:
        user = self._users.get(user_id)
        if not user:
            return None
        updated = user.model_copy(update={**changes, "updated_at": utcnow()})
        self._users[user_id] = updated
        return updated

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users."""
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def add(self, user: User) -> User:
        """Insert a user."""
        if self._email_taken(user.email):
            raise EmailAlreadyRegisteredError(user.email.root)
        self._users[user.id] = user
        return user

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[Username] = None,
        email: Optional[Email] = None,
    ) -> Optional[User]:
        """Apply a partial username/email patch."""
        changes: dict[str, Any] = {}
        if username is not None:
            changes["username"] = username
        if email is not None:
            if self._email_taken(email, exclude=user_id):
                raise EmailAlreadyRegisteredError(email.root)
            changes["email"] = email
        return self._update(user_id, **changes)

    async def replace_preferences(
        self, user_id: UserId, preferences: Preferences
    ) -> Optional[User]:
        """Replace the preferences record."""
        return self._update(user_id, preferences=preferences)

    async def push_avatar(self, user_id: UserId, avatar: str) -> Optional[User]:
        """Append and activate an avatar."""
        user = self._users.get(user_id)
        if not user:
            return None
        return self._update(user_id, avatars=[*user.avatars, avatar], avatar=avatar)

    async def set_avatar(self, user_id: UserId, avatar: str) -> Optional[User]:
        """Set the active avatar."""
        return self._update(user_id, avatar=avatar)

    async def increment_post_count(self, user_id: UserId) -> Optional[UserStats]:
        """Increment the post counter."""
        user = self._users.get(user_id)
        if not user:
            return None
        stats = user.stats.model_copy(update={"posts": user.stats.posts + 1})
        self._update(user_id, stats=stats)
        return stats

    async def get_stats(self, user_id: UserId) -> Optional[UserStats]:
        """Read the stored counters."""
        user = self._users.get(user_id)
        return user.stats if user else None

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None
