"""Builders for test entities."""

import io
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from inkwell.domain.model import Post, User
from inkwell.domain.service import MediaUpload
from inkwell.domain.value import Email, PostId, UserId, Username

STRONG_PASSWORD = "LongEnough1234!"


def make_user(
    email: str = "ada@example.com",
    username: str = "ada",
    password_hash: str = "not-a-real-digest",
    **overrides,
) -> User:
    """User with sensible defaults."""
    return User(
        id=UserId(uuid4()),
        email=Email(email),
        username=Username(username),
        password_hash=password_hash,
        **overrides,
    )


def make_post(
    author_id: UserId,
    title: str = "Hello",
    content: str = "First post",
    minutes_ago: int = 0,
    **overrides,
) -> Post:
    """Post created ``minutes_ago`` minutes in the past."""
    created = datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)
    return Post(
        id=PostId(uuid4()),
        title=title,
        author_id=author_id,
        content=content,
        created_at=created,
        updated_at=created,
        **overrides,
    )


class BytesSource:
    """In-memory upload body with the async ``read`` of an UploadFile."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    async def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)


def make_upload(
    data: bytes = b"\x89PNG fake image bytes",
    filename: str = "me.png",
    content_type: str | None = "image/png",
) -> MediaUpload:
    """Media upload backed by bytes."""
    return MediaUpload(
        filename=filename, content_type=content_type, source=BytesSource(data)
    )
