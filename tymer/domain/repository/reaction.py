"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from tymer.domain.model.moment import Reaction
from tymer.domain.value import MomentId


class ReactionRepository(ABC):
    """Repository for Reaction entity."""

    @abstractmethod
    async def find_by_moments(self, moment_ids: Iterable[MomentId]) -> list[Reaction]:
        """Find reactions on any of the moments, oldest first (batch query).

        Args:
            moment_ids: Moments to fetch reactions for

        Returns:
            List of reactions with their author attached
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Insert a reaction."""
        pass

    @abstractmethod
    async def delete_by_moment(self, moment_id: MomentId) -> int:
        """Delete every reaction on a moment.

        Returns:
            Number of reactions deleted
        """
        pass
