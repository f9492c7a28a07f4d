"""User domain service."""

from typing import Optional

import logfire

from inkwell.domain.error import UserNotFoundError
from inkwell.domain.model import User
from inkwell.domain.repository import UserRepository
from inkwell.domain.value import Email, Preferences, UserId, UserStats, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations.

    Every mutation maps to one atomic repository call. Methods that target an
    existing user raise UserNotFoundError when it is gone.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise UserNotFoundError(str(user_id))
            return user

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None."""
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            return await self.user_repository.find_by_id(user_id)

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch lookup used to expand post authors."""
        with logfire.span("user_service.get_users_by_ids", count=len(user_ids)):
            if not user_ids:
                return {}
            return await self.user_repository.find_by_ids(user_ids)

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by (normalized) email."""
        with logfire.span("user_service.get_user_by_email"):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found by email", user_id=str(user.id))
            return user

    async def register(self, user: User) -> User:
        """Create a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        with logfire.span("user_service.register", user_id=str(user.id)):
            saved = await self.user_repository.add(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[Username] = None,
        email: Optional[Email] = None,
    ) -> User:
        """Apply a partial profile patch.

        Raises:
            UserNotFoundError: If user not found
            EmailAlreadyRegisteredError: If the new email is taken
        """
        with logfire.span(
            "user_service.update_profile",
            user_id=str(user_id),
            username_changed=username is not None,
            email_changed=email is not None,
        ):
            updated = await self.user_repository.update_profile(
                user_id, username=username, email=email
            )
            if not updated:
                raise UserNotFoundError(str(user_id))
            logfire.info("Profile updated", user_id=str(user_id))
            return updated

    async def replace_preferences(
        self, user_id: UserId, preferences: Preferences
    ) -> User:
        """Replace the preferences record wholesale."""
        with logfire.span("user_service.replace_preferences", user_id=str(user_id)):
            updated = await self.user_repository.replace_preferences(
                user_id, preferences
            )
            if not updated:
                raise UserNotFoundError(str(user_id))
            return updated

    async def add_avatar(self, user_id: UserId, avatar: str) -> User:
        """Record an uploaded avatar and make it the active one."""
        with logfire.span("user_service.add_avatar", user_id=str(user_id)):
            updated = await self.user_repository.push_avatar(user_id, avatar)
            if not updated:
                raise UserNotFoundError(str(user_id))
            logfire.info(
                "Avatar added", user_id=str(user_id), avatar_count=len(updated.avatars)
            )
            return updated

    async def set_active_avatar(self, user_id: UserId, avatar: str) -> User:
        """Switch the active avatar (membership is checked by the caller)."""
        with logfire.span("user_service.set_active_avatar", user_id=str(user_id)):
            updated = await self.user_repository.set_avatar(user_id, avatar)
            if not updated:
                raise UserNotFoundError(str(user_id))
            return updated

    async def increment_post_count(self, user_id: UserId) -> UserStats:
        """Atomically bump the stored post counter.

        Independent of the number of Post records the user actually owns.
        """
        with logfire.span("user_service.increment_post_count", user_id=str(user_id)):
            stats = await self.user_repository.increment_post_count(user_id)
            if stats is None:
                raise UserNotFoundError(str(user_id))
            logfire.info("Post counter incremented", user_id=str(user_id), posts=stats.posts)
            return stats

    async def get_stats(self, user_id: UserId) -> UserStats:
        """Read the stored counters."""
        with logfire.span("user_service.get_stats", user_id=str(user_id)):
            stats = await self.user_repository.get_stats(user_id)
            if stats is None:
                raise UserNotFoundError(str(user_id))
            return stats

    async def delete(self, user_id: UserId) -> bool:
        """Delete the user record only.

        Authored posts, uploaded files and issued tokens are left alone.
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id), deleted=deleted)
            return deleted
