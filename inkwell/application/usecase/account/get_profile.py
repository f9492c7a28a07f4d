"""Get profile use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import ResponseModel
from inkwell.domain.model import User
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import Preferences, UserId, UserStats


class UserProfile(ResponseModel):
    """A user as shown to its owner. The password digest is never included."""

    id: str
    public_id: UUID
    email: str
    username: str
    avatar: str
    avatars: list[str]
    preferences: Preferences
    stats: UserStats
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User, stats: UserStats | None = None) -> "UserProfile":
        """Build a profile, optionally overriding the stored counters."""
        return cls(
            id=str(user.id),
            public_id=user.public_id,
            email=user.email.root,
            username=user.username.root,
            avatar=user.avatar,
            avatars=list(user.avatars),
            preferences=user.preferences,
            stats=stats or user.stats,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: UserId


class GetProfileUseCase:
    """Use case for reading the caller's own profile."""

    def __init__(self, user_service: UserService, post_service: PostService) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
        """
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self, request: GetProfileRequest) -> UserProfile:
        """Load the profile with a live post count.

        ``stats.posts`` is counted from the posts table; ``stats.likes`` is
        the stored counter. The stored post counter (see GetStatsUseCase) is
        not reconciled with this count.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        with logfire.span("get_profile.execute", user_id=str(request.user_id)):
            user = await self.user_service.get_by_id(request.user_id)
            posts = await self.post_service.count_posts_by_author(user.id)
            return UserProfile.from_user(
                user, stats=UserStats(posts=posts, likes=user.stats.likes)
            )
