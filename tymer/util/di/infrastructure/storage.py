"""Blob storage infrastructure providers."""

from dishka import Scope, provide

from tymer.adapter.storage import HttpBlobStore
from tymer.config import Settings
from tymer.domain.service import BlobStore
from tymer.util.di.base import ProviderBase
from tymer.util.error import ConfigurationError


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using the storage REST API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_blob_store(self, settings: Settings) -> BlobStore:
        """Provide HTTP blob store.

        Raises:
            ConfigurationError: If production runs with the placeholder key
        """
        if (
            settings.environment == "production"
            and settings.storage.service_key == "CHANGE_ME_IN_PRODUCTION"
        ):
            raise ConfigurationError("STORAGE__SERVICE_KEY must be configured")
        return HttpBlobStore(settings.storage)
