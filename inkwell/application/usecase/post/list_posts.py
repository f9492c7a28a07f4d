"""List posts use case."""

import logfire
from pydantic import BaseModel

from inkwell.domain.service import PostService, UserService

from .get_post import PostView


class ListPostsRequest(BaseModel):
    """List posts request (no filters; the listing is unpaginated)."""

    pass


class ListPostsUseCase:
    """Use case for listing every post, newest first."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> list[PostView]:
        """Load all posts and expand authors with one batch lookup."""
        with logfire.span("list_posts.execute"):
            posts = await self.post_service.list_posts()
            author_ids = list(dict.fromkeys(post.author_id for post in posts))
            authors = await self.user_service.get_users_by_ids(author_ids)
            return [PostView.from_post(post, authors.get(post.author_id)) for post in posts]
