"""PostgreSQL implementation of Reaction repository."""

from typing import Iterable

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tymer.domain.model import Reaction
from tymer.domain.repository import ProfileRepository, ReactionRepository
from tymer.domain.value import MomentId
from tymer.persistence.mappers import reaction_to_dict, row_to_reaction
from tymer.persistence.tables import reactions_table

from .base import PostgresRepository


class PostgresReactionRepository(PostgresRepository, ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(
        self, session: AsyncSession, profile_repository: ProfileRepository
    ) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session
            profile_repository: Used to attach reaction authors
        """
        super().__init__(session)
        self.profile_repository = profile_repository

    async def find_by_moments(self, moment_ids: Iterable[MomentId]) -> list[Reaction]:
        """Reactions on the moments, oldest first, with authors attached."""
        ids = list(set(moment_ids))
        if not ids:
            return []

        stmt = (
            select(reactions_table)
            .where(reactions_table.c.moment_id.in_(ids))
            .order_by(reactions_table.c.created_at.asc())
        )
        result = await self._execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]

        # Batch fetch authors
        authors = {
            p.id: p
            for p in await self.profile_repository.find_by_ids(
                row["author_id"] for row in rows
            )
        }
        return [row_to_reaction(row, authors.get(row["author_id"])) for row in rows]

    async def save(self, reaction: Reaction) -> Reaction:
        stmt = insert(reactions_table).values(**reaction_to_dict(reaction))
        await self._execute(stmt)
        await self._flush()
        return reaction

    async def delete_by_moment(self, moment_id: MomentId) -> int:
        stmt = delete(reactions_table).where(reactions_table.c.moment_id == moment_id)
        result = await self._execute(stmt)
        return result.rowcount or 0
