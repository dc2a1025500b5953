"""Get profile use case."""

from datetime import datetime

from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.domain.model import Profile
from tymer.domain.service import ProfileService


class ProfileResponse(BaseModel):
    """The signed-in user's own profile."""

    user_id: str
    display_name: str
    initials: str
    avatar_color: str
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            user_id=str(profile.id),
            display_name=profile.display_name,
            initials=profile.initials,
            avatar_color=profile.avatar_color.value,
            avatar_url=profile.avatar_url,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str | None  # From the session


class GetProfileUseCase:
    """Use case for reading the user's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        user_id = require_user(request.user_id)
        profile = await self.profile_service.get_profile(user_id)
        return ProfileResponse.from_profile(profile)
