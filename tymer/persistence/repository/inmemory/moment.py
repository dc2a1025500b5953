"""In-memory moment repository for testing."""

from datetime import datetime
from typing import Iterable, Optional

from tymer.domain.model import Moment
from tymer.domain.repository import (
    MomentRepository,
    ProfileRepository,
    ReactionRepository,
)
from tymer.domain.value import MomentId, UserId


class InMemoryMomentRepository(MomentRepository):
    """In-memory implementation of MomentRepository for testing.

    Finders attach authors and reactions like the PostgreSQL version.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        reaction_repository: ReactionRepository,
    ) -> None:
        self._moments: dict[MomentId, Moment] = {}
        self.profile_repository = profile_repository
        self.reaction_repository = reaction_repository

    async def _hydrate(self, moment: Moment) -> Moment:
        author = await self.profile_repository.find_by_id(moment.author_id)
        reactions = await self.reaction_repository.find_by_moments([moment.id])
        return moment.model_copy(update={"author": author, "reactions": reactions})

    async def find_by_id(self, moment_id: MomentId) -> Optional[Moment]:
        moment = self._moments.get(moment_id)
        return await self._hydrate(moment) if moment else None

    async def find_by_author(self, author_id: UserId, limit: int = 7) -> list[Moment]:
        matches = [m for m in self._moments.values() if m.author_id == author_id]
        matches.sort(key=lambda m: m.captured_at, reverse=True)
        return [await self._hydrate(m) for m in matches[:limit]]

    async def find_captured_since(
        self, author_ids: Iterable[UserId], since: datetime, limit: int = 100
    ) -> list[Moment]:
        ids = set(author_ids)
        matches = [
            m
            for m in self._moments.values()
            if m.author_id in ids and m.captured_at >= since
        ]
        matches.sort(key=lambda m: m.captured_at, reverse=True)
        return [await self._hydrate(m) for m in matches[:limit]]

    async def save(self, moment: Moment) -> Moment:
        self._moments[moment.id] = moment.model_copy(
            update={"author": None, "reactions": []}
        )
        return moment

    async def delete(self, moment_id: MomentId) -> bool:
        if self._moments.pop(moment_id, None) is None:
            return False
        await self.reaction_repository.delete_by_moment(moment_id)
        return True
