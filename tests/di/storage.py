"""Mock storage providers for testing."""

from dishka import Scope, provide

from tymer.domain.service import BlobStore
from tymer.util.di.infrastructure.storage import StorageProvider

from .faults import FlakyBlobStore


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping uploads in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_blob_store(self) -> BlobStore:
        """Provide in-memory blob store."""
        return FlakyBlobStore()
