"""Blob store clients.

`HttpBlobStore` talks to a Supabase-style storage REST API:

    POST   {url}/storage/v1/object/{bucket}/{path}     upload
    DELETE {url}/storage/v1/object/{bucket}            delete (json prefixes)
    GET    {url}/storage/v1/object/public/{bucket}/{path}
"""

import logging
from typing import Sequence

import httpx
import logfire

from tymer.adapter.error import StorageError
from tymer.config import StorageSettings
from tymer.domain.error import TransientError
from tymer.domain.service.media_service import BlobStore

logger = logging.getLogger(__name__)


class HttpBlobStore(BlobStore):
    """Blob store backed by the storage REST API."""

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize storage client.

        Args:
            settings: Storage settings (endpoint, service key, timeout)
        """
        self.base_url = settings.url.rstrip("/")
        self.service_key = settings.service_key
        self.timeout = settings.timeout_seconds

    def _headers(self, **extra: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
            **extra,
        }

    def _object_url(self, bucket: str, path: str = "") -> str:
        url = f"{self.base_url}/storage/v1/object/{bucket}"
        return f"{url}/{path}" if path else url

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{path}"

    def _check(self, response: httpx.Response, operation: str) -> None:
        if response.status_code < 400:
            return
        logfire.error(
            "Storage request failed",
            operation=operation,
            status_code=response.status_code,
            error=response.text,
        )
        if response.status_code >= 500:
            raise TransientError(f"Storage {operation} failed: {response.status_code}")
        raise StorageError(
            f"Storage {operation} failed: {response.status_code}",
            status_code=response.status_code,
        )

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        """Upload an object.

        Raises:
            TransientError: Network failure, timeout or 5xx response
            StorageError: Any other rejected request
        """
        headers = self._headers(
            **{
                "Content-Type": content_type,
                "x-upsert": "true" if upsert else "false",
            }
        )
        logger.debug("Uploading %s/%s (%d bytes)", bucket, path, len(data))
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self._object_url(bucket, path), content=data, headers=headers
                )
        except httpx.HTTPError as e:
            logfire.error("Storage upload HTTP error", bucket=bucket, error=str(e))
            raise TransientError(f"HTTP error during upload: {e}") from e

        self._check(response, "upload")
        logfire.info("Object uploaded", bucket=bucket, path=path, size=len(data))
        return path

    async def delete(self, bucket: str, paths: Sequence[str]) -> None:
        """Delete objects by path.

        Raises:
            TransientError: Network failure, timeout or 5xx response
            StorageError: Any other rejected request
        """
        if not paths:
            return
        logger.debug("Deleting %d objects from %s", len(paths), bucket)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    "DELETE",
                    self._object_url(bucket),
                    json={"prefixes": list(paths)},
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logfire.error("Storage delete HTTP error", bucket=bucket, error=str(e))
            raise TransientError(f"HTTP error during delete: {e}") from e

        self._check(response, "delete")
        logfire.info("Objects deleted", bucket=bucket, count=len(paths))


class InMemoryBlobStore(BlobStore):
    """Blob store kept in a dict, for tests and local runs."""

    def __init__(self, base_url: str = "http://storage.test") -> None:
        self.base_url = base_url
        self.objects: dict[tuple[str, str], tuple[bytes, str]] = {}

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        if (bucket, path) in self.objects and not upsert:
            raise StorageError(f"Object already exists: {bucket}/{path}", 409)
        self.objects[(bucket, path)] = (data, content_type)
        return path

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{path}"

    async def delete(self, bucket: str, paths: Sequence[str]) -> None:
        for path in paths:
            self.objects.pop((bucket, path), None)

    def paths(self, bucket: str) -> list[str]:
        return [p for b, p in self.objects if b == bucket]
