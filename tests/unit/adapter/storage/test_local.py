"""Unit tests for LocalMediaStorage."""

import pytest

from inkwell.adapter.error import StorageError
from inkwell.adapter.storage import LocalMediaStorage
from inkwell.domain.error import MediaTooLargeError


async def _chunks(*parts: bytes):
    for part in parts:
        yield part


async def _failing_chunks():
    yield b"partial"
    raise MediaTooLargeError(7)


@pytest.fixture
def storage(tmp_path):
    return LocalMediaStorage(tmp_path / "uploads")


class TestLocalMediaStorage:
    """Tests for LocalMediaStorage."""

    @pytest.mark.asyncio
    async def test_write_creates_root_and_file(self, storage, tmp_path):
        await storage.write("a.png", _chunks(b"ab", b"cd"))

        assert (tmp_path / "uploads" / "a.png").read_bytes() == b"abcd"

    @pytest.mark.asyncio
    async def test_failed_stream_leaves_nothing(self, storage, tmp_path):
        """Neither the final file nor the partial file should survive."""
        with pytest.raises(MediaTooLargeError):
            await storage.write("big.png", _failing_chunks())

        assert not (tmp_path / "uploads" / "big.png").exists()
        assert list((tmp_path / "uploads").iterdir()) == []

    @pytest.mark.asyncio
    async def test_delete(self, storage, tmp_path):
        await storage.write("a.png", _chunks(b"x"))

        await storage.delete("a.png")
        await storage.delete("a.png")  # Missing files are ignored

        assert not (tmp_path / "uploads" / "a.png").exists()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", ".", "..", "../escape.png", "dir/a.png", "dir\\a.png"])
    async def test_rejects_names_outside_root(self, storage, name):
        with pytest.raises(StorageError):
            await storage.write(name, _chunks(b"x"))
