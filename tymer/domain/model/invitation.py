"""Invitation entity.

Invitations turn a shareable code into a friendship. A code is single
use and expires; an expired code behaves exactly like an unknown one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tymer.domain.model.common import DomainModel
from tymer.domain.value import InvitationId, InviteCode, UserId


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - A user holds at most one active (unused, unexpired) invitation
    - Used exactly once, together with the friendship it creates
    - Expired invitations are never deleted, only ignored
    """

    id: InvitationId
    creator_id: UserId
    code: InviteCode
    is_used: bool = False
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    used_by: Optional[UserId] = None
    used_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now

    def is_active(self, now: datetime) -> bool:
        """Unused and not expired at `now`."""
        return not self.is_used and not self.is_expired(now)
