"""Upload avatar use case."""

from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.domain.service import ProfileService

from .get_profile import ProfileResponse


class UploadAvatarRequest(BaseModel):
    """Upload avatar request."""

    user_id: str | None  # From the session
    image: bytes


class UploadAvatarUseCase:
    """Use case for replacing the user's avatar picture."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize upload avatar use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UploadAvatarRequest) -> ProfileResponse:
        user_id = require_user(request.user_id)
        profile = await self.profile_service.upload_avatar(user_id, request.image)
        return ProfileResponse.from_profile(profile)
