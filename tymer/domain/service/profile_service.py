"""Profile domain service."""

import logfire

from tymer.domain.error import NotFoundError, ValidationError
from tymer.domain.model.profile import Profile
from tymer.domain.repository import ProfileRepository
from tymer.domain.value import AvatarColor, UserId

from .base import Service
from .clock import Clock
from .media_service import MediaService

MAX_DISPLAY_NAME_LENGTH = 50


class ProfileService(Service):
    """Domain service for reading and editing a user's own profile."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        media_service: MediaService,
        clock: Clock,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            media_service: Media service for avatar uploads
            clock: Clock stamping updates
        """
        self.profile_repository = profile_repository
        self.media_service = media_service
        self.clock = clock

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get a profile by user ID.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.get_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def update_profile(
        self,
        user_id: UserId,
        display_name: str | None = None,
        avatar_color: AvatarColor | str | None = None,
    ) -> Profile:
        """Update name and color of the user's own profile.

        Args:
            user_id: Owner of the profile
            display_name: New display name, trimmed
            avatar_color: New color; unknown names fall back to blue

        Returns:
            The saved profile

        Raises:
            ValidationError: If the name is blank or too long
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            profile = await self.get_profile(user_id)
            changes: dict[str, object] = {}

            if display_name is not None:
                name = display_name.strip()
                if not name:
                    raise ValidationError("Display name cannot be empty")
                if len(name) > MAX_DISPLAY_NAME_LENGTH:
                    raise ValidationError(
                        f"Display name exceeds {MAX_DISPLAY_NAME_LENGTH} characters"
                    )
                changes["display_name"] = name

            if avatar_color is not None:
                changes["avatar_color"] = (
                    avatar_color
                    if isinstance(avatar_color, AvatarColor)
                    else AvatarColor.parse(avatar_color)
                )

            if not changes:
                return profile

            changes["updated_at"] = self.clock.now()
            saved = await self.profile_repository.save(profile.model_copy(update=changes))
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(changes)
            )
            return saved

    async def upload_avatar(self, user_id: UserId, data: bytes) -> Profile:
        """Replace the avatar picture and store its public URL.

        Raises:
            ValidationError: If the image is empty
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.upload_avatar", user_id=str(user_id)):
            if not data:
                raise ValidationError("Avatar image is empty")
            profile = await self.get_profile(user_id)
            url = await self.media_service.upload_avatar(user_id, data)
            saved = await self.profile_repository.save(
                profile.model_copy(
                    update={"avatar_url": url, "updated_at": self.clock.now()}
                )
            )
            logfire.info("Avatar uploaded", user_id=str(user_id))
            return saved
