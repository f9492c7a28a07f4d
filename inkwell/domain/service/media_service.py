"""Media ingestion domain service.

Uploaded files live in one flat directory. Entities reference them by a
relative path (``/uploads/<filename>``) which is served as a static asset.
"""

import random
import time
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from dataclasses import dataclass
from pathlib import PurePosixPath, PureWindowsPath
from typing import Protocol
from urllib.parse import quote, unquote

import logfire

from inkwell.config import UploadSettings
from inkwell.domain.error import (
    MediaTooLargeError,
    NoFileUploadedError,
    UnsupportedMediaTypeError,
)
from inkwell.domain.value import UserId

from .base import Service

CHUNK_SIZE = 64 * 1024


class UploadSource(Protocol):
    """Readable upload body (FastAPI's UploadFile satisfies this)."""

    async def read(self, size: int = -1) -> bytes: ...


@dataclass(frozen=True)
class MediaUpload:
    """A single uploaded file as received from a multipart field."""

    filename: str
    content_type: str | None
    source: UploadSource


class MediaStorage(ABC):
    """Storage backend interface for uploaded media."""

    @abstractmethod
    async def write(self, name: str, chunks: AsyncIterator[bytes]) -> None:
        """Stream ``chunks`` into a file called ``name``.

        If the chunk iterator raises, nothing is left behind under ``name``
        and the exception propagates.
        """
        pass

    @abstractmethod
    async def delete(self, name: str) -> None:
        """Remove a stored file; missing files are ignored."""
        pass


def original_basename(filename: str | None) -> str:
    """Client supplied filename without any directory components."""
    if not filename:
        return ""
    return PureWindowsPath(PurePosixPath(filename).name).name


def avatar_filename(user_id: UserId, original: str, now_ms: int) -> str:
    """``avatar_<user id>_<epoch ms><original extension>``."""
    extension = PurePosixPath(original_basename(original)).suffix
    return f"avatar_{user_id}_{now_ms}{extension}"


def post_image_filename(original: str, now_ms: int, suffix: int) -> str:
    """``<epoch ms>-<random>-<original filename>``."""
    return f"{now_ms}-{suffix}-{original_basename(original)}"


class MediaService(Service):
    """Validates uploads, names them, and hands them to storage."""

    def __init__(self, storage: MediaStorage, upload_settings: UploadSettings) -> None:
        """Initialize media service.

        Args:
            storage: Storage backend
            upload_settings: Limits and public mount path
        """
        self.storage = storage
        self.upload_settings = upload_settings

    def public_path(self, name: str) -> str:
        """Relative URL path an entity stores for a file (name percent-encoded)."""
        return f"{self.upload_settings.public_path.rstrip('/')}/{quote(name)}"

    async def store_avatar(self, user_id: UserId, upload: MediaUpload | None) -> str:
        """Run the avatar pipeline.

        Only allow-listed image types up to the configured size are accepted.

        Returns:
            Relative path of the stored file

        Raises:
            NoFileUploadedError: If there is no file
            UnsupportedMediaTypeError: If the type is not an allowed image
            MediaTooLargeError: If the file exceeds the avatar size limit
        """
        if upload is None or not upload.filename:
            raise NoFileUploadedError()

        with logfire.span(
            "media_service.store_avatar",
            user_id=str(user_id),
            content_type=upload.content_type,
        ):
            if upload.content_type not in self.upload_settings.avatar_allowed_types:
                logfire.warn(
                    "Rejected avatar type",
                    user_id=str(user_id),
                    content_type=upload.content_type,
                )
                raise UnsupportedMediaTypeError(upload.content_type)

            name = avatar_filename(user_id, upload.filename, _now_ms())
            await self.storage.write(
                name, _read_chunks(upload.source, self.upload_settings.avatar_max_bytes)
            )
            logfire.info("Avatar stored", user_id=str(user_id), filename=name)
            return self.public_path(name)

    async def store_post_image(self, upload: MediaUpload | None) -> str | None:
        """Run the post image pipeline (no type or size restriction).

        Returns:
            Relative path of the stored file, None when there is no file
        """
        if upload is None or not upload.filename:
            return None

        with logfire.span(
            "media_service.store_post_image", content_type=upload.content_type
        ):
            name = post_image_filename(
                upload.filename, _now_ms(), random.randint(0, 10**9)
            )
            await self.storage.write(name, _read_chunks(upload.source, None))
            logfire.info("Post image stored", filename=name)
            return self.public_path(name)

    async def discard(self, path: str) -> None:
        """Delete a stored file given the path an entity would reference."""
        name = unquote(path.rsplit("/", 1)[-1])
        with logfire.span("media_service.discard", filename=name):
            await self.storage.delete(name)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


async def _read_chunks(
    source: UploadSource, limit_bytes: int | None
) -> AsyncIterator[bytes]:
    """Yield the upload body in chunks, failing once it passes ``limit_bytes``."""
    total = 0
    while True:
        chunk = await source.read(CHUNK_SIZE)
        if not chunk:
            return
        total += len(chunk)
        if limit_bytes is not None and total > limit_bytes:
            raise MediaTooLargeError(limit_bytes)
        yield chunk
