"""In-memory friendship repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from tymer.domain.model import Friendship
from tymer.domain.repository import FriendshipRepository
from tymer.domain.value import FriendshipId, FriendshipStatus, UserId


class InMemoryFriendshipRepository(FriendshipRepository):
    """In-memory implementation of FriendshipRepository for testing."""

    def __init__(self) -> None:
        self._friendships: dict[FriendshipId, Friendship] = {}

    async def find_by_id(self, friendship_id: FriendshipId) -> Optional[Friendship]:
        return self._friendships.get(friendship_id)

    async def find_between(self, user_a: UserId, user_b: UserId) -> list[Friendship]:
        return [
            f
            for f in self._friendships.values()
            if (f.user_id, f.friend_id) in ((user_a, user_b), (user_b, user_a))
        ]

    async def find_for_user(
        self, user_id: UserId, status: Optional[FriendshipStatus] = None
    ) -> list[Friendship]:
        matches = [
            f
            for f in self._friendships.values()
            if f.involves(user_id) and (status is None or f.status == status)
        ]
        matches.sort(key=lambda f: f.created_at, reverse=True)
        return matches

    async def save(self, friendship: Friendship) -> Friendship:
        """Insert a row.

        Raises:
            IntegrityError: If the ordered pair already exists
        """
        for existing in self._friendships.values():
            if (existing.user_id, existing.friend_id) == (
                friendship.user_id,
                friendship.friend_id,
            ):
                raise IntegrityError("Duplicate friendship pair", None, Exception())

        self._friendships[friendship.id] = friendship
        return friendship

    async def update_status(
        self, friendship_id: FriendshipId, status: FriendshipStatus
    ) -> Optional[Friendship]:
        existing = self._friendships.get(friendship_id)
        if not existing:
            return None
        updated = existing.model_copy(update={"status": status})
        self._friendships[friendship_id] = updated
        return updated

    async def delete(self, friendship_id: FriendshipId) -> bool:
        return self._friendships.pop(friendship_id, None) is not None
