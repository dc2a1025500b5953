"""In-memory reaction repository for testing."""

from typing import Iterable

from tymer.domain.model import Reaction
from tymer.domain.repository import ProfileRepository, ReactionRepository
from tymer.domain.value import MomentId


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self._reactions: list[Reaction] = []
        self.profile_repository = profile_repository

    async def find_by_moments(self, moment_ids: Iterable[MomentId]) -> list[Reaction]:
        ids = set(moment_ids)
        matches = [r for r in self._reactions if r.moment_id in ids]
        matches.sort(key=lambda r: r.created_at)

        result = []
        for reaction in matches:
            author = await self.profile_repository.find_by_id(reaction.author_id)
            result.append(reaction.model_copy(update={"author": author}))
        return result

    async def save(self, reaction: Reaction) -> Reaction:
        self._reactions.append(reaction.model_copy(update={"author": None}))
        return reaction

    async def delete_by_moment(self, moment_id: MomentId) -> int:
        before = len(self._reactions)
        self._reactions = [r for r in self._reactions if r.moment_id != moment_id]
        return before - len(self._reactions)
