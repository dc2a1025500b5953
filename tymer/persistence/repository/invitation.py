"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, or_, select, update

from tymer.domain.model import Invitation
from tymer.domain.repository import InvitationRepository
from tymer.domain.value import InvitationId, InviteCode, UserId
from tymer.persistence.mappers import invitation_to_dict, row_to_invitation
from tymer.persistence.tables import invitations_table

from .base import PostgresRepository

t = invitations_table


class PostgresInvitationRepository(PostgresRepository, InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        stmt = select(t).where(t.c.id == invitation_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_code(self, code: InviteCode) -> Optional[Invitation]:
        stmt = select(t).where(t.c.code == code.root)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_active_by_creator(
        self, creator_id: UserId, now: datetime, limit: int = 1
    ) -> list[Invitation]:
        stmt = (
            select(t)
            .where(
                t.c.creator_id == creator_id,
                t.c.is_used.is_(False),
                or_(t.c.expires_at.is_(None), t.c.expires_at > now),
            )
            .order_by(t.c.created_at.desc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Insert an invitation.

        Raises:
            IntegrityError: If the code is already taken
        """
        stmt = insert(t).values(**invitation_to_dict(invitation))
        await self._insert(stmt)
        await self._flush()
        return invitation

    async def mark_used(
        self, invitation_id: InvitationId, used_by: UserId, used_at: datetime
    ) -> bool:
        """Conditional update: only an unused invitation flips."""
        stmt = (
            update(t)
            .where(and_(t.c.id == invitation_id, t.c.is_used.is_(False)))
            .values(is_used=True, used_by=used_by, used_at=used_at)
        )
        result = await self._execute(stmt)
        return result.rowcount == 1

    async def release(self, invitation_id: InvitationId) -> None:
        stmt = (
            update(t)
            .where(t.c.id == invitation_id)
            .values(is_used=False, used_by=None, used_at=None)
        )
        await self._execute(stmt)
