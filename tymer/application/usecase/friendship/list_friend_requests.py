"""List incoming friend requests use case."""

from datetime import datetime

from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.application.usecase.common import ProfileItem
from tymer.domain.repository import ProfileRepository
from tymer.domain.service import FriendshipService


class FriendRequestItem(BaseModel):
    """A pending request addressed to the user."""

    friendship_id: str
    requester: ProfileItem | None
    created_at: datetime


class ListFriendRequestsRequest(BaseModel):
    """List friend requests request."""

    user_id: str | None  # From the session


class ListFriendRequestsResponse(BaseModel):
    """List friend requests response."""

    requests: list[FriendRequestItem]


class ListFriendRequestsUseCase:
    """Use case for listing pending requests the user can accept."""

    def __init__(
        self,
        friendship_service: FriendshipService,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize list friend requests use case.

        Args:
            friendship_service: Friendship domain service
            profile_repository: Profile repository
        """
        self.friendship_service = friendship_service
        self.profile_repository = profile_repository

    async def execute(
        self, request: ListFriendRequestsRequest
    ) -> ListFriendRequestsResponse:
        user_id = require_user(request.user_id)

        pending = await self.friendship_service.list_pending_requests(user_id)

        # Batch fetch requesters
        requesters = {
            p.id: p
            for p in await self.profile_repository.find_by_ids(
                [f.user_id for f in pending]
            )
        }

        return ListFriendRequestsResponse(
            requests=[
                FriendRequestItem(
                    friendship_id=str(f.id),
                    requester=(
                        ProfileItem.from_profile(requesters[f.user_id])
                        if f.user_id in requesters
                        else None
                    ),
                    created_at=f.created_at,
                )
                for f in pending
            ]
        )
