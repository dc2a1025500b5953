"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from tymer.domain.model.profile import Profile
from tymer.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Profile | None:
        """Find a profile by user ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[Profile]:
        """Find several profiles at once (batch query).

        Unknown IDs are skipped silently.
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
