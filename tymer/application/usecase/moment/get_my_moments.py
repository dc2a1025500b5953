"""Get my moments use case."""

from pydantic import BaseModel, Field

from tymer.application.usecase.base import require_user
from tymer.application.usecase.common import MomentItem
from tymer.domain.service import MediaService, MomentService


class GetMyMomentsRequest(BaseModel):
    """Get my moments request."""

    user_id: str | None  # From the session
    limit: int | None = Field(default=None, ge=1, le=100)


class GetMyMomentsResponse(BaseModel):
    """Get my moments response."""

    moments: list[MomentItem]
    has_posted_today: bool


class GetMyMomentsUseCase:
    """Use case for the user's own recent moments."""

    def __init__(self, moment_service: MomentService, media_service: MediaService) -> None:
        """Initialize get my moments use case.

        Args:
            moment_service: Moment domain service
            media_service: Media service (public URLs)
        """
        self.moment_service = moment_service
        self.media_service = media_service

    async def execute(self, request: GetMyMomentsRequest) -> GetMyMomentsResponse:
        user_id = require_user(request.user_id)
        moments = await self.moment_service.get_my_moments(user_id, request.limit)
        latest = moments[0] if moments else None
        return GetMyMomentsResponse(
            moments=[MomentItem.from_moment(m, self.media_service) for m in moments],
            has_posted_today=self.moment_service.moment_gate.has_posted_today(latest),
        )
