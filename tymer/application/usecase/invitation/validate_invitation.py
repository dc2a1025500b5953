"""Validate invitation use case."""

import logfire
from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.application.usecase.common import ProfileItem
from tymer.domain.repository import ProfileRepository
from tymer.domain.service import InvitationService


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    code: str
    user_id: str | None  # From the session


class ValidateInvitationResponse(BaseModel):
    """Validate invitation response."""

    valid: bool
    creator: ProfileItem | None = None


class ValidateInvitationUseCase:
    """Use case for checking a code before the user confirms it.

    Unknown, used and expired codes are reported the same way.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize validate invitation use case.

        Args:
            invitation_service: Invitation domain service
            profile_repository: Profile repository
        """
        self.invitation_service = invitation_service
        self.profile_repository = profile_repository

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Validate an invitation code.

        Args:
            request: Validation request with the typed code

        Returns:
            Whether the code is redeemable and who created it
        """
        require_user(request.user_id)

        with logfire.span("validate_invitation.execute"):
            invitation = await self.invitation_service.validate(request.code)
            if not invitation:
                return ValidateInvitationResponse(valid=False)

            creator = await self.profile_repository.find_by_id(invitation.creator_id)
            return ValidateInvitationResponse(
                valid=True,
                creator=ProfileItem.from_profile(creator) if creator else None,
            )
