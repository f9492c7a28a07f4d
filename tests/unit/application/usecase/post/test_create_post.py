"""Unit tests for CreatePostUseCase."""

from dishka import AsyncContainer
import pytest

from inkwell.application.usecase.post import CreatePostRequest, CreatePostUseCase
from inkwell.domain.error import ValidationError
from inkwell.domain.service import MediaStorage, PostService, UserService
from tests.factories import make_upload, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BASE_URL = "http://blog.example.com/"


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_with_defaults(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        post_service = await unit_env.get(PostService)
        create_post = await unit_env.get(CreatePostUseCase)
        user = await user_service.register(make_user())

        # Act
        view = await create_post.execute(
            CreatePostRequest(
                author_id=user.id,
                title="  Hello  ",
                content="First post",
                base_url=BASE_URL,
            )
        )

        # Assert
        assert view.title == "Hello"
        assert view.reading_time == "Quick"
        assert view.tags == []
        assert view.links == []
        assert view.likes == []
        assert view.image is None
        assert view.author is not None
        assert view.author.id == str(user.id)
        assert view.author.username == "ada"
        assert await post_service.count_posts_by_author(user.id) == 1

    @pytest.mark.asyncio
    async def test_tags_and_links_are_trimmed(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        create_post = await unit_env.get(CreatePostUseCase)
        user = await user_service.register(make_user())

        view = await create_post.execute(
            CreatePostRequest(
                author_id=user.id,
                title="Hello",
                content="Body",
                reading_time="5 min",
                tags="a, b ,c",
                links="https://a.example, ,https://b.example",
                base_url=BASE_URL,
            )
        )

        assert view.tags == ["a", "b", "c"]
        assert view.links == ["https://a.example", "https://b.example"]
        assert view.reading_time == "5 min"

    @pytest.mark.asyncio
    async def test_image_is_stored_with_absolute_url(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        storage = await unit_env.get(MediaStorage)
        create_post = await unit_env.get(CreatePostUseCase)
        user = await user_service.register(make_user())

        # Act
        view = await create_post.execute(
            CreatePostRequest(
                author_id=user.id,
                title="Hello",
                content="Body",
                image=make_upload(b"cover", filename="cover.jpg", content_type="image/jpeg"),
                base_url=BASE_URL,
            )
        )

        # Assert
        assert view.image.startswith("http://blog.example.com/uploads/")
        assert view.image.endswith("-cover.jpg")
        name = view.image.rsplit("/", 1)[-1]
        assert storage.files[name] == b"cover"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content",
        [(None, "Body"), ("Hello", None), ("   ", "Body"), ("Hello", "  ")],
    )
    async def test_title_and_content_required(
        self, unit_env: AsyncContainer, title, content
    ):
        # Arrange
        user_service = await unit_env.get(UserService)
        post_service = await unit_env.get(PostService)
        create_post = await unit_env.get(CreatePostUseCase)
        user = await user_service.register(make_user())

        # Act
        with pytest.raises(ValidationError, match="Title and content are required"):
            await create_post.execute(
                CreatePostRequest(
                    author_id=user.id, title=title, content=content, base_url=BASE_URL
                )
            )

        # Assert
        assert await post_service.list_posts() == []
