"""Moment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable

from tymer.domain.model.moment import Moment
from tymer.domain.value import MomentId, UserId


class MomentRepository(ABC):
    """Repository for Moment aggregate.

    Every finder returns moments with the nested author profile and the
    reactions (oldest first, each with its author) already attached.
    """

    @abstractmethod
    async def find_by_id(self, moment_id: MomentId) -> Moment | None:
        """Find a moment by ID.

        Args:
            moment_id: The moment's unique identifier

        Returns:
            The moment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int = 7) -> list[Moment]:
        """Find an author's moments, newest capture first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of results

        Returns:
            List of moments
        """
        pass

    @abstractmethod
    async def find_captured_since(
        self, author_ids: Iterable[UserId], since: datetime, limit: int = 100
    ) -> list[Moment]:
        """Find moments by any of the authors captured at or after `since`.

        Args:
            author_ids: Authors to include
            since: Lower bound on capture time (inclusive)
            limit: Maximum number of results

        Returns:
            List of moments, newest capture first
        """
        pass

    @abstractmethod
    async def save(self, moment: Moment) -> Moment:
        """Insert a moment.

        Nested author and reactions are ignored on write.
        """
        pass

    @abstractmethod
    async def delete(self, moment_id: MomentId) -> bool:
        """Delete a moment and, by cascade, its reactions.

        Returns:
            True if a moment was deleted, False if none existed
        """
        pass
