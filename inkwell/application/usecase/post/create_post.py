"""Create post use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel, InstanceOf

from inkwell.domain.error import ValidationError
from inkwell.domain.model.post import DEFAULT_READING_TIME, Post
from inkwell.domain.service import MediaService, MediaUpload, PostService, UserService
from inkwell.domain.service.post_service import split_list_field
from inkwell.domain.value import PostId, UserId

from .get_post import PostView


class CreatePostRequest(BaseModel):
    """Create post request, mirroring the multipart form fields."""

    author_id: UserId  # From the authenticated caller
    title: str | None = None
    description: str | None = None
    content: str | None = None
    reading_time: str | None = None
    tags: str | None = None  # Comma separated
    links: str | None = None  # Comma separated
    image: InstanceOf[MediaUpload] | None = None
    base_url: str  # Scheme and host the image URL is built from


class CreatePostUseCase:
    """Use case for publishing a post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        media_service: MediaService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            media_service: Media ingestion service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.media_service = media_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Require a title and content
        2. Split tags and links into trimmed lists
        3. Store the optional image and build its absolute URL
        4. Save the post (the image is discarded if this fails)
        5. Return the post with its author expanded

        Raises:
            ValidationError: If title or content is missing
        """
        title = (request.title or "").strip()
        content = request.content or ""
        if not title or not content.strip():
            raise ValidationError("Title and content are required")

        with logfire.span(
            "create_post.execute", author_id=str(request.author_id), title=title
        ):
            path = await self.media_service.store_post_image(request.image)
            image_url = f"{request.base_url.rstrip('/')}{path}" if path else None

            post = Post(
                id=PostId(uuid4()),
                title=title,
                author_id=request.author_id,
                reading_time=(request.reading_time or "").strip() or DEFAULT_READING_TIME,
                image=image_url,
                description=request.description,
                content=content,
                tags=split_list_field(request.tags),
                links=split_list_field(request.links),
            )

            try:
                saved = await self.post_service.save_post(post)
            except Exception:
                if path:
                    logfire.warn("Post save failed, discarding image", path=path)
                    await self.media_service.discard(path)
                raise

            author = await self.user_service.get_user_by_id(saved.author_id)
            return PostView.from_post(saved, author)
