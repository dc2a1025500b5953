"""In-memory stores that can be told to fail."""

from typing import Optional, Sequence

from tymer.adapter.storage import InMemoryBlobStore
from tymer.domain.model import Friendship, Moment, Reaction
from tymer.domain.value import FriendshipId, FriendshipStatus
from tymer.persistence.repository.inmemory import (
    InMemoryFriendshipRepository,
    InMemoryMomentRepository,
    InMemoryReactionRepository,
)


class FlakyFriendshipRepository(InMemoryFriendshipRepository):
    """Raises `fail_on_update` from update_status while it is set."""

    fail_on_update: Exception | None = None

    async def update_status(
        self, friendship_id: FriendshipId, status: FriendshipStatus
    ) -> Optional[Friendship]:
        if self.fail_on_update:
            raise self.fail_on_update
        return await super().update_status(friendship_id, status)


class FlakyMomentRepository(InMemoryMomentRepository):
    """Raises `fail_on_save` from save while it is set."""

    fail_on_save: Exception | None = None

    async def save(self, moment: Moment) -> Moment:
        if self.fail_on_save:
            raise self.fail_on_save
        return await super().save(moment)


class FlakyReactionRepository(InMemoryReactionRepository):
    """Raises `fail_on_save` from save while it is set."""

    fail_on_save: Exception | None = None

    async def save(self, reaction: Reaction) -> Reaction:
        if self.fail_on_save:
            raise self.fail_on_save
        return await super().save(reaction)


class FlakyBlobStore(InMemoryBlobStore):
    """Raises `fail_with` from every write, `fail_on_delete` from deletes."""

    fail_with: Exception | None = None
    fail_on_delete: Exception | None = None

    async def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        if self.fail_with:
            raise self.fail_with
        return await super().upload(bucket, path, data, content_type, upsert)

    async def delete(self, bucket: str, paths: Sequence[str]) -> None:
        if self.fail_with:
            raise self.fail_with
        if self.fail_on_delete:
            raise self.fail_on_delete
        await super().delete(bucket, paths)
