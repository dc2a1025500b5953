"""PostgreSQL implementation of Friendship repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, or_, select, update

from tymer.domain.model import Friendship
from tymer.domain.repository import FriendshipRepository
from tymer.domain.value import FriendshipId, FriendshipStatus, UserId
from tymer.persistence.mappers import friendship_to_dict, row_to_friendship
from tymer.persistence.tables import friendships_table

from .base import PostgresRepository

t = friendships_table


class PostgresFriendshipRepository(PostgresRepository, FriendshipRepository):
    """PostgreSQL implementation of FriendshipRepository."""

    async def find_by_id(self, friendship_id: FriendshipId) -> Optional[Friendship]:
        stmt = select(t).where(t.c.id == friendship_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_friendship(dict(row)) if row else None

    async def find_between(self, user_a: UserId, user_b: UserId) -> list[Friendship]:
        """Rows for the pair, checking both orderings."""
        stmt = select(t).where(
            or_(
                and_(t.c.user_id == user_a, t.c.friend_id == user_b),
                and_(t.c.user_id == user_b, t.c.friend_id == user_a),
            )
        )
        result = await self._execute(stmt)
        return [row_to_friendship(dict(row)) for row in result.mappings().all()]

    async def find_for_user(
        self, user_id: UserId, status: Optional[FriendshipStatus] = None
    ) -> list[Friendship]:
        stmt = select(t).where(or_(t.c.user_id == user_id, t.c.friend_id == user_id))
        if status is not None:
            stmt = stmt.where(t.c.status == status.value)
        stmt = stmt.order_by(t.c.created_at.desc())

        result = await self._execute(stmt)
        return [row_to_friendship(dict(row)) for row in result.mappings().all()]

    async def save(self, friendship: Friendship) -> Friendship:
        """Insert a row.

        Raises:
            IntegrityError: If the ordered pair already exists
        """
        stmt = insert(t).values(**friendship_to_dict(friendship))
        await self._insert(stmt)
        await self._flush()
        return friendship

    async def update_status(
        self, friendship_id: FriendshipId, status: FriendshipStatus
    ) -> Optional[Friendship]:
        stmt = (
            update(t)
            .where(t.c.id == friendship_id)
            .values(status=status.value)
            .returning(*t.c)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_friendship(dict(row)) if row else None

    async def delete(self, friendship_id: FriendshipId) -> bool:
        stmt = delete(t).where(t.c.id == friendship_id)
        result = await self._execute(stmt)
        return bool(result.rowcount)
