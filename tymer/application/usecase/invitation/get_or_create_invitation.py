"""Get or create invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.domain.service import InvitationService


class GetOrCreateInvitationRequest(BaseModel):
    """Get or create invitation request."""

    user_id: str | None  # From the session


class GetOrCreateInvitationResponse(BaseModel):
    """Get or create invitation response."""

    invitation_id: str
    code: str
    expires_at: datetime | None
    created_at: datetime


class GetOrCreateInvitationUseCase:
    """Use case for fetching the invitation code a user shares with friends.

    A user holds at most one active invitation; repeated calls return the
    same code until it is used or expires.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize get or create invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(
        self, request: GetOrCreateInvitationRequest
    ) -> GetOrCreateInvitationResponse:
        """Return the active invitation, minting one if needed.

        Raises:
            NotAuthenticatedError: If there is no session user
            ConflictError: If no unique code could be minted
        """
        user_id = require_user(request.user_id)

        with logfire.span("get_or_create_invitation.execute", user_id=str(user_id)):
            invitation = await self.invitation_service.get_or_create_invitation(
                user_id
            )
            return GetOrCreateInvitationResponse(
                invitation_id=str(invitation.id),
                code=invitation.code.root,
                expires_at=invitation.expires_at,
                created_at=invitation.created_at,
            )
