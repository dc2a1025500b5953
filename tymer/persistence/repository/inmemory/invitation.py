"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from tymer.domain.model import Invitation
from tymer.domain.repository import InvitationRepository
from tymer.domain.value import InvitationId, InviteCode, UserId


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, Invitation] = {}

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        return self._invitations.get(invitation_id)

    async def find_by_code(self, code: InviteCode) -> Optional[Invitation]:
        for invitation in self._invitations.values():
            if invitation.code == code:
                return invitation
        return None

    async def find_active_by_creator(
        self, creator_id: UserId, now: datetime, limit: int = 1
    ) -> list[Invitation]:
        matches = [
            i
            for i in self._invitations.values()
            if i.creator_id == creator_id and i.is_active(now)
        ]
        matches.sort(key=lambda i: i.created_at, reverse=True)
        return matches[:limit]

    async def save(self, invitation: Invitation) -> Invitation:
        """Insert an invitation.

        Raises:
            IntegrityError: If the code is already taken
        """
        if await self.find_by_code(invitation.code):
            raise IntegrityError("Duplicate invitation code", None, Exception())
        self._invitations[invitation.id] = invitation
        return invitation

    async def mark_used(
        self, invitation_id: InvitationId, used_by: UserId, used_at: datetime
    ) -> bool:
        existing = self._invitations.get(invitation_id)
        if not existing or existing.is_used:
            return False
        self._invitations[invitation_id] = existing.model_copy(
            update={"is_used": True, "used_by": used_by, "used_at": used_at}
        )
        return True

    async def release(self, invitation_id: InvitationId) -> None:
        existing = self._invitations.get(invitation_id)
        if existing:
            self._invitations[invitation_id] = existing.model_copy(
                update={"is_used": False, "used_by": None, "used_at": None}
            )
