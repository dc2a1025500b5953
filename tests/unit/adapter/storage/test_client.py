"""Tests for the blob store clients."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from tymer.adapter.error import StorageError
from tymer.adapter.storage.client import HttpBlobStore, InMemoryBlobStore
from tymer.config import StorageSettings
from tymer.domain.error import TransientError


@pytest.fixture
def store():
    return HttpBlobStore(
        StorageSettings(url="http://storage.local/", service_key="secret")
    )


class TestHttpBlobStore:
    """Tests for HttpBlobStore."""

    @pytest.mark.asyncio
    async def test_upload(self, store):
        """Should POST the bytes to the object URL with service credentials."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200)

            path = await store.upload("moments", "u/1.jpg", b"jpeg", "image/jpeg")

            assert path == "u/1.jpg"
            mock_client.post.assert_called_once_with(
                "http://storage.local/storage/v1/object/moments/u/1.jpg",
                content=b"jpeg",
                headers={
                    "Authorization": "Bearer secret",
                    "apikey": "secret",
                    "Content-Type": "image/jpeg",
                    "x-upsert": "false",
                },
            )

    @pytest.mark.asyncio
    async def test_upload_with_upsert(self, store):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200)

            await store.upload("avatars", "u/avatar.jpg", b"x", "image/jpeg", upsert=True)

            headers = mock_client.post.call_args.kwargs["headers"]
            assert headers["x-upsert"] == "true"

    @pytest.mark.asyncio
    async def test_sets_timeout(self, store):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(200)

            await store.upload("moments", "a.jpg", b"x", "image/jpeg")

            mock_client_class.assert_called_once_with(timeout=10.0)

    @pytest.mark.asyncio
    async def test_delete_sends_prefixes(self, store):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.request.return_value = httpx.Response(200)

            await store.delete("moments", ["a.jpg", "b.jpg"])

            mock_client.request.assert_called_once_with(
                "DELETE",
                "http://storage.local/storage/v1/object/moments",
                json={"prefixes": ["a.jpg", "b.jpg"]},
                headers={"Authorization": "Bearer secret", "apikey": "secret"},
            )

    @pytest.mark.asyncio
    async def test_delete_nothing_skips_request(self, store):
        with patch("httpx.AsyncClient") as mock_client_class:
            await store.delete("moments", [])

            mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_server_error_is_transient(self, store):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(503, text="busy")

            with pytest.raises(TransientError):
                await store.upload("moments", "a.jpg", b"x", "image/jpeg")

    @pytest.mark.asyncio
    async def test_client_error_is_storage_error(self, store):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = httpx.Response(413, text="too big")

            with pytest.raises(StorageError) as exc_info:
                await store.upload("moments", "a.jpg", b"x", "image/jpeg")

            assert exc_info.value.status_code == 413

    @pytest.mark.asyncio
    async def test_network_error_is_transient(self, store):
        """Connection failures are retryable."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.request.side_effect = httpx.ConnectError("connection refused")

            with pytest.raises(TransientError):
                await store.delete("moments", ["a.jpg"])

    def test_public_url(self, store):
        assert (
            store.public_url("avatars", "u/avatar.jpg")
            == "http://storage.local/storage/v1/object/public/avatars/u/avatar.jpg"
        )


class TestInMemoryBlobStore:
    """Tests for InMemoryBlobStore."""

    @pytest.mark.asyncio
    async def test_duplicate_without_upsert_conflicts(self):
        store = InMemoryBlobStore()
        await store.upload("moments", "a.jpg", b"x", "image/jpeg")

        with pytest.raises(StorageError) as exc_info:
            await store.upload("moments", "a.jpg", b"y", "image/jpeg")

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_upsert_replaces(self):
        store = InMemoryBlobStore()
        await store.upload("avatars", "a.jpg", b"x", "image/jpeg")
        await store.upload("avatars", "a.jpg", b"y", "image/png", upsert=True)

        assert store.objects[("avatars", "a.jpg")] == (b"y", "image/png")
