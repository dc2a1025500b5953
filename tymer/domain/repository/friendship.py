"""Friendship repository interface."""

from abc import ABC, abstractmethod

from tymer.domain.model.friendship import Friendship
from tymer.domain.value import FriendshipId, FriendshipStatus, UserId


class FriendshipRepository(ABC):
    """Repository for Friendship entity.

    The store enforces uniqueness on the ordered pair (user_id, friend_id).
    """

    @abstractmethod
    async def find_by_id(self, friendship_id: FriendshipId) -> Friendship | None:
        """Find a friendship by ID."""
        pass

    @abstractmethod
    async def find_between(self, user_a: UserId, user_b: UserId) -> list[Friendship]:
        """Find rows linking two users, in either direction.

        Args:
            user_a: One side of the pair
            user_b: The other side

        Returns:
            Matching rows (normally zero or one)
        """
        pass

    @abstractmethod
    async def find_for_user(
        self, user_id: UserId, status: FriendshipStatus | None = None
    ) -> list[Friendship]:
        """Find rows where the user is either side.

        Args:
            user_id: The user's ID
            status: Optional status filter

        Returns:
            List of friendships, newest first
        """
        pass

    @abstractmethod
    async def save(self, friendship: Friendship) -> Friendship:
        """Insert a friendship.

        Raises:
            IntegrityError: If the ordered pair already exists
        """
        pass

    @abstractmethod
    async def update_status(
        self, friendship_id: FriendshipId, status: FriendshipStatus
    ) -> Friendship | None:
        """Change the status of a row.

        Returns:
            The updated friendship, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, friendship_id: FriendshipId) -> bool:
        """Delete a row.

        Returns:
            True if a row was deleted, False if none existed
        """
        pass
