"""Update profile use case."""

from pydantic import BaseModel, Field

from tymer.application.usecase.base import require_user
from tymer.domain.service import ProfileService

from .get_profile import ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str | None  # From the session
    display_name: str | None = Field(default=None, max_length=100)
    avatar_color: str | None = None


class UpdateProfileUseCase:
    """Use case for editing the user's own name and color.

    The profile is always the session user's; there is no way to name
    another user's profile here.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Apply the given changes.

        Raises:
            NotAuthenticatedError: If there is no session user
            ValidationError: If the name is blank
        """
        user_id = require_user(request.user_id)
        profile = await self.profile_service.update_profile(
            user_id,
            display_name=request.display_name,
            avatar_color=request.avatar_color,
        )
        return ProfileResponse.from_profile(profile)
