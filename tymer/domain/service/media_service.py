"""Media domain service and blob store port."""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import uuid4

import logfire

from tymer.config import StorageSettings
from tymer.domain.value import UserId

from .base import Service


class BlobStore(ABC):
    """Port for the object storage holding images and audio."""

    @abstractmethod
    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        """Store `data` at `bucket/path`.

        Args:
            bucket: Bucket name
            path: Object path inside the bucket
            data: Raw bytes
            content_type: MIME type of the object
            upsert: Overwrite an existing object instead of failing

        Returns:
            The stored object path

        Raises:
            TransientError: If the store is unreachable
        """
        pass

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        """Public URL of an object."""
        pass

    @abstractmethod
    async def delete(self, bucket: str, paths: Sequence[str]) -> None:
        """Delete objects. Missing paths are ignored."""
        pass


class MediaService(Service):
    """Places moment images, voice reactions and avatars in their buckets.

    Paths are namespaced by the owner's lowercase user id so bucket
    policies can restrict writes to the owner's own folder.
    """

    IMAGE_CONTENT_TYPE = "image/jpeg"
    AUDIO_CONTENT_TYPE = "audio/m4a"

    def __init__(self, blob_store: BlobStore, settings: StorageSettings) -> None:
        """Initialize media service.

        Args:
            blob_store: Blob store adapter
            settings: Storage settings (bucket names)
        """
        self.blob_store = blob_store
        self.settings = settings

    @staticmethod
    def _folder(user_id: UserId) -> str:
        return str(user_id).lower()

    async def upload_moment_image(self, user_id: UserId, data: bytes) -> str:
        """Upload a moment picture as `{user}/{uuid}.jpg`.

        Returns:
            Path of the image inside the moments bucket
        """
        path = f"{self._folder(user_id)}/{uuid4()}.jpg"
        with logfire.span("media_service.upload_moment_image", path=path, size=len(data)):
            return await self.blob_store.upload(
                self.settings.moments_bucket, path, data, self.IMAGE_CONTENT_TYPE
            )

    async def upload_voice_reaction(self, user_id: UserId, data: bytes) -> str:
        """Upload a voice reaction as `{user}/{uuid}.m4a`."""
        path = f"{self._folder(user_id)}/{uuid4()}.m4a"
        with logfire.span(
            "media_service.upload_voice_reaction", path=path, size=len(data)
        ):
            return await self.blob_store.upload(
                self.settings.voice_bucket, path, data, self.AUDIO_CONTENT_TYPE
            )

    async def upload_avatar(self, user_id: UserId, data: bytes) -> str:
        """Overwrite the user's avatar picture.

        Returns:
            Public URL of the avatar
        """
        path = f"{self._folder(user_id)}/avatar.jpg"
        with logfire.span("media_service.upload_avatar", path=path, size=len(data)):
            await self.blob_store.upload(
                self.settings.avatars_bucket,
                path,
                data,
                self.IMAGE_CONTENT_TYPE,
                upsert=True,
            )
            return self.blob_store.public_url(self.settings.avatars_bucket, path)

    def moment_image_url(self, path: str) -> str:
        return self.blob_store.public_url(self.settings.moments_bucket, path)

    def voice_reaction_url(self, path: str) -> str:
        return self.blob_store.public_url(self.settings.voice_bucket, path)

    async def delete_moment_image(self, path: str) -> None:
        with logfire.span("media_service.delete_moment_image", path=path):
            await self.blob_store.delete(self.settings.moments_bucket, [path])

    async def delete_voice_reactions(self, paths: Sequence[str]) -> None:
        if not paths:
            return
        with logfire.span("media_service.delete_voice_reactions", count=len(paths)):
            await self.blob_store.delete(self.settings.voice_bucket, list(paths))
