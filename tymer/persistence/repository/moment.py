"""PostgreSQL implementation of Moment repository."""

from collections import defaultdict
from datetime import datetime
from typing import Any, Iterable, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tymer.domain.model import Moment, Reaction
from tymer.domain.repository import (
    MomentRepository,
    ProfileRepository,
    ReactionRepository,
)
from tymer.domain.value import MomentId, UserId
from tymer.persistence.mappers import moment_to_dict, row_to_moment
from tymer.persistence.tables import moments_table

from .base import PostgresRepository


class PostgresMomentRepository(PostgresRepository, MomentRepository):
    """PostgreSQL implementation of MomentRepository.

    Authors and reactions are loaded with one batch query each, whatever
    the number of moments.
    """

    def __init__(
        self,
        session: AsyncSession,
        profile_repository: ProfileRepository,
        reaction_repository: ReactionRepository,
    ) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session
            profile_repository: Used to attach moment authors
            reaction_repository: Used to attach reactions
        """
        super().__init__(session)
        self.profile_repository = profile_repository
        self.reaction_repository = reaction_repository

    async def _hydrate(self, rows: list[dict[str, Any]]) -> list[Moment]:
        if not rows:
            return []

        authors = {
            p.id: p
            for p in await self.profile_repository.find_by_ids(
                row["author_id"] for row in rows
            )
        }
        reactions: dict[MomentId, list[Reaction]] = defaultdict(list)
        for reaction in await self.reaction_repository.find_by_moments(
            row["id"] for row in rows
        ):
            reactions[reaction.moment_id].append(reaction)

        return [
            row_to_moment(row, authors.get(row["author_id"]), reactions.get(row["id"]))
            for row in rows
        ]

    async def find_by_id(self, moment_id: MomentId) -> Optional[Moment]:
        stmt = select(moments_table).where(moments_table.c.id == moment_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return (await self._hydrate([dict(row)]))[0]

    async def find_by_author(self, author_id: UserId, limit: int = 7) -> list[Moment]:
        stmt = (
            select(moments_table)
            .where(moments_table.c.author_id == author_id)
            .order_by(moments_table.c.captured_at.desc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return await self._hydrate([dict(row) for row in result.mappings().all()])

    async def find_captured_since(
        self, author_ids: Iterable[UserId], since: datetime, limit: int = 100
    ) -> list[Moment]:
        ids = list(set(author_ids))
        if not ids:
            return []

        stmt = (
            select(moments_table)
            .where(
                moments_table.c.author_id.in_(ids),
                moments_table.c.captured_at >= since,
            )
            .order_by(moments_table.c.captured_at.desc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return await self._hydrate([dict(row) for row in result.mappings().all()])

    async def save(self, moment: Moment) -> Moment:
        stmt = insert(moments_table).values(**moment_to_dict(moment))
        await self._execute(stmt)
        await self._flush()
        return moment

    async def delete(self, moment_id: MomentId) -> bool:
        """Delete a moment; reactions go with it through the foreign key cascade."""
        stmt = delete(moments_table).where(moments_table.c.id == moment_id)
        result = await self._execute(stmt)
        return bool(result.rowcount)
