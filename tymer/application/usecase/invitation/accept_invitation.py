"""Accept invitation use case."""

import logfire
from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.application.usecase.common import ProfileItem
from tymer.domain.service import InvitationService


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request."""

    code: str
    user_id: str | None  # From the session


class AcceptInvitationResponse(BaseModel):
    """Accept invitation response."""

    friend: ProfileItem


class AcceptInvitationUseCase:
    """Use case for redeeming a friend's invitation code."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize accept invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: AcceptInvitationRequest) -> AcceptInvitationResponse:
        """Redeem the code and befriend its creator.

        Raises:
            NotAuthenticatedError: If there is no session user
            InvitationNotFoundError: Unknown, used or expired code
            SelfAcceptanceError: The user created the invitation
            AlreadyFriendsError: The two users are already friends
        """
        user_id = require_user(request.user_id)

        with logfire.span("accept_invitation.execute", user_id=str(user_id)):
            creator = await self.invitation_service.accept(request.code, user_id)
            return AcceptInvitationResponse(friend=ProfileItem.from_profile(creator))
