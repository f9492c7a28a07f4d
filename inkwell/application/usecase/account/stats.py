"""Stored counter use cases."""

from pydantic import BaseModel

from inkwell.application.usecase.base import ResponseModel
from inkwell.domain.service import UserService
from inkwell.domain.value import UserId


class StatsRequest(BaseModel):
    """Stats request."""

    user_id: UserId


class StatsResponse(ResponseModel):
    """Stored counters."""

    posts: int
    likes: int


class IncrementPostStatUseCase:
    """Atomically add one to the stored post counter.

    The counter is client driven and independent of how many posts the user
    actually owns.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: StatsRequest) -> StatsResponse:
        """Increment and return the counters."""
        stats = await self.user_service.increment_post_count(request.user_id)
        return StatsResponse(posts=stats.posts, likes=stats.likes)


class GetStatsUseCase:
    """Read the stored counters (not the live post count)."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: StatsRequest) -> StatsResponse:
        """Return the counters."""
        stats = await self.user_service.get_stats(request.user_id)
        return StatsResponse(posts=stats.posts, likes=stats.likes)
