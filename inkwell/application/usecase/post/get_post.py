"""Get post use case and the shared post view."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import ResponseModel
from inkwell.domain.error import PostNotFoundError
from inkwell.domain.model import Post, User
from inkwell.domain.service import PostService, UserService
from inkwell.domain.value import PostId


class AuthorView(ResponseModel):
    """Public projection of a post's author."""

    id: str
    username: str
    avatar: str

    @classmethod
    def from_user(cls, user: User) -> "AuthorView":
        return cls(id=str(user.id), username=user.username.root, avatar=user.avatar)


class PostView(ResponseModel):
    """A post with its author expanded.

    ``author`` is None when the author account has been deleted.
    """

    id: str
    title: str
    author: AuthorView | None
    reading_time: str
    image: str | None
    description: str | None
    content: str
    tags: list[str]
    links: list[str]
    likes: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, author: User | None) -> "PostView":
        return cls(
            id=str(post.id),
            title=post.title,
            author=AuthorView.from_user(author) if author else None,
            reading_time=post.reading_time,
            image=post.image,
            description=post.description,
            content=post.content,
            tags=list(post.tags),
            links=list(post.links),
            likes=[str(user_id) for user_id in post.likes],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class GetPostRequest(BaseModel):
    """Get post request; the id arrives as an unparsed path segment."""

    post_id: str


class GetPostUseCase:
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Load one post and expand its author.

        Raises:
            PostNotFoundError: If the id is malformed or unknown
        """
        try:
            post_id = PostId(UUID(request.post_id))
        except ValueError as e:
            raise PostNotFoundError(request.post_id) from e

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise PostNotFoundError(request.post_id)

        author = await self.user_service.get_user_by_id(post.author_id)
        return PostView.from_post(post, author)
