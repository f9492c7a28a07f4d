"""In-memory media storage for testing."""

from collections.abc import AsyncIterator

from inkwell.domain.service.media_service import MediaStorage


class InMemoryMediaStorage(MediaStorage):
    """Keeps uploaded files in a dict keyed by filename."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    async def write(self, name: str, chunks: AsyncIterator[bytes]) -> None:
        """Collect the chunks; store nothing if the stream fails."""
        buffer = bytearray()
        async for chunk in chunks:
            buffer.extend(chunk)
        self.files[name] = bytes(buffer)

    async def delete(self, name: str) -> None:
        """Forget a file."""
        self.files.pop(name, None)
