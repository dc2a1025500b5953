"""PostgreSQL implementation of Profile repository."""

from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from tymer.domain.model import Profile
from tymer.domain.repository import ProfileRepository
from tymer.domain.value import UserId
from tymer.persistence.mappers import profile_to_dict, row_to_profile
from tymer.persistence.tables import profiles_table

from .base import PostgresRepository


class PostgresProfileRepository(PostgresRepository, ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[Profile]:
        """Find several profiles in one query."""
        ids = list(set(user_ids))
        if not ids:
            return []
        stmt = select(profiles_table).where(profiles_table.c.id.in_(ids))
        result = await self._execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        """Upsert a profile.

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        values = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self._execute(stmt)
        await self._flush()
        return profile
