"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from inkwell.domain.model.user import User
from inkwell.domain.value import Email, Preferences, UserId, UserStats, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations. Mutations are
    single atomic store operations; none of them read-modify-write in
    application code. Methods that update a user return the updated record,
    or None if the user does not exist.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users at once.

        Args:
            user_ids: IDs to look up (duplicates allowed)

        Returns:
            Mapping of found IDs to users; missing IDs are absent
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalized) email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to create

        Returns:
            The stored user

        Raises:
            EmailAlreadyRegisteredError: If the store already holds the email
        """
        pass

    @abstractmethod
    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[Username] = None,
        email: Optional[Email] = None,
    ) -> Optional[User]:
        """Apply a partial username/email patch.

        Raises:
            EmailAlreadyRegisteredError: If the new email belongs to another user
        """
        pass

    @abstractmethod
    async def replace_preferences(
        self, user_id: UserId, preferences: Preferences
    ) -> Optional[User]:
        """Replace the whole preferences record."""
        pass

    @abstractmethod
    async def push_avatar(self, user_id: UserId, avatar: str) -> Optional[User]:
        """Append to ``avatars`` and make it the active ``avatar`` in one write."""
        pass

    @abstractmethod
    async def set_avatar(self, user_id: UserId, avatar: str) -> Optional[User]:
        """Set the active avatar."""
        pass

    @abstractmethod
    async def increment_post_count(self, user_id: UserId) -> Optional[UserStats]:
        """Atomically increment ``stats.posts`` by 1.

        Returns:
            The counters after the increment, None if the user does not exist
        """
        pass

    @abstractmethod
    async def get_stats(self, user_id: UserId) -> Optional[UserStats]:
        """Read the stored counters."""
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user record.

        Returns:
            True if a record was removed
        """
        pass
