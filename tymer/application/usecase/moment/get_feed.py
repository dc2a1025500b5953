"""Get feed use case."""

from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.application.usecase.common import MomentItem
from tymer.domain.service import MediaService, MomentService


class GetFeedRequest(BaseModel):
    """Get feed request."""

    user_id: str | None  # From the session


class GetFeedResponse(BaseModel):
    """Get feed response."""

    moments: list[MomentItem]


class GetFeedUseCase:
    """Use case for today's moments from the user's friends."""

    def __init__(self, moment_service: MomentService, media_service: MediaService) -> None:
        """Initialize get feed use case.

        Args:
            moment_service: Moment domain service
            media_service: Media service (public URLs)
        """
        self.moment_service = moment_service
        self.media_service = media_service

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        user_id = require_user(request.user_id)
        moments = await self.moment_service.get_feed(user_id)
        return GetFeedResponse(
            moments=[MomentItem.from_moment(m, self.media_service) for m in moments]
        )
