"""Filesystem media storage."""

from collections.abc import AsyncIterator
from pathlib import Path

import anyio
import logfire

from inkwell.adapter.error import StorageError
from inkwell.domain.service.media_service import MediaStorage


class LocalMediaStorage(MediaStorage):
    """Stores uploads as files in a single flat directory.

    Files are first written to a hidden ``.part`` sibling and renamed into
    place once complete, so a failed upload never leaves a file under its
    final name.
    """

    def __init__(self, root: Path) -> None:
        """Initialize storage.

        Args:
            root: Directory holding uploaded files
        """
        self.root = anyio.Path(root)

    def _path(self, name: str) -> anyio.Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise StorageError(f"Invalid media filename: {name!r}")
        return self.root / name

    async def write(self, name: str, chunks: AsyncIterator[bytes]) -> None:
        """Stream chunks to ``root/name``."""
        target = self._path(name)
        partial = self.root / f".{name}.part"
        try:
            await self.root.mkdir(parents=True, exist_ok=True)
            async with await anyio.open_file(partial, "wb") as f:
                async for chunk in chunks:
                    await f.write(chunk)
            await partial.rename(target)
        except OSError as e:
            await partial.unlink(missing_ok=True)
            logfire.error("Media write failed", filename=name, error=str(e))
            raise StorageError(f"Failed to store {name}") from e
        except BaseException:
            await partial.unlink(missing_ok=True)
            raise

    async def delete(self, name: str) -> None:
        """Remove ``root/name`` if present."""
        try:
            await self._path(name).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {name}") from e
