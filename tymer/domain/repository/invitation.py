"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from tymer.domain.model.invitation import Invitation
from tymer.domain.value import InvitationId, InviteCode, UserId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    The store enforces uniqueness on `code`.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID."""
        pass

    @abstractmethod
    async def find_by_code(self, code: InviteCode) -> Invitation | None:
        """Find an invitation by code, used or not.

        Args:
            code: The invitation code

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_creator(
        self, creator_id: UserId, now: datetime, limit: int = 1
    ) -> list[Invitation]:
        """Find unused invitations of a creator that expire after `now`.

        Args:
            creator_id: The creator's user ID
            now: Reference time for expiry
            limit: Maximum number of results

        Returns:
            Active invitations, newest first
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Insert an invitation.

        Raises:
            IntegrityError: If the code is already taken
        """
        pass

    @abstractmethod
    async def mark_used(
        self, invitation_id: InvitationId, used_by: UserId, used_at: datetime
    ) -> bool:
        """Atomically flip an unused invitation to used.

        The update only applies while `is_used` is false, so two
        concurrent redemptions cannot both succeed.

        Returns:
            True if this call marked the invitation, False otherwise
        """
        pass

    @abstractmethod
    async def release(self, invitation_id: InvitationId) -> None:
        """Undo `mark_used` (compensation when the friendship step fails)."""
        pass
