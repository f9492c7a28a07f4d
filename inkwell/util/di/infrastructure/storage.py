"""Media storage infrastructure providers."""

from dishka import Scope, provide

from inkwell.adapter.storage import LocalMediaStorage
from inkwell.config import UploadSettings
from inkwell.domain.service import MediaStorage
from inkwell.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Media storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Stores uploads on the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_storage(self, upload_settings: UploadSettings) -> MediaStorage:
        """Provide filesystem media storage rooted at the uploads directory."""
        return LocalMediaStorage(upload_settings.root)
