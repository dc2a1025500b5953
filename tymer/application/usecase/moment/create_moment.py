"""Create moment use case."""

import logfire
from pydantic import BaseModel, Field

from tymer.application.usecase.base import require_user
from tymer.application.usecase.common import MomentItem
from tymer.domain.service import MediaService, MomentService


class CreateMomentRequest(BaseModel):
    """Create moment request."""

    user_id: str | None  # From the session
    image: bytes | None = None
    description: str | None = Field(default=None, max_length=280)


class CreateMomentResponse(BaseModel):
    """Create moment response."""

    moment: MomentItem


class CreateMomentUseCase:
    """Use case for posting today's moment."""

    def __init__(self, moment_service: MomentService, media_service: MediaService) -> None:
        """Initialize create moment use case.

        Args:
            moment_service: Moment domain service
            media_service: Media service (public URLs)
        """
        self.moment_service = moment_service
        self.media_service = media_service

    async def execute(self, request: CreateMomentRequest) -> CreateMomentResponse:
        """Post a moment.

        Raises:
            NotAuthenticatedError: If there is no session user
            WindowClosedError: No window is open
            AlreadyPostedTodayError: The user already posted today
        """
        user_id = require_user(request.user_id)

        with logfire.span("create_moment.execute", user_id=str(user_id)):
            moment = await self.moment_service.create_moment(
                user_id, image=request.image, description=request.description
            )
            return CreateMomentResponse(
                moment=MomentItem.from_moment(moment, self.media_service)
            )
