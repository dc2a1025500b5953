"""Accept friend request use case."""

from pydantic import BaseModel

from tymer.application.usecase.base import parse_id, require_user
from tymer.domain.service import FriendshipService
from tymer.domain.value import FriendshipId


class AcceptFriendRequestRequest(BaseModel):
    """Accept friend request request."""

    friendship_id: str
    user_id: str | None  # From the session


class AcceptFriendRequestResponse(BaseModel):
    """Accept friend request response."""

    friendship_id: str
    friend_id: str
    status: str


class AcceptFriendRequestUseCase:
    """Use case for the addressee accepting a pending request."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        """Initialize accept friend request use case.

        Args:
            friendship_service: Friendship domain service
        """
        self.friendship_service = friendship_service

    async def execute(
        self, request: AcceptFriendRequestRequest
    ) -> AcceptFriendRequestResponse:
        user_id = require_user(request.user_id)
        friendship_id = FriendshipId(parse_id(request.friendship_id, "friendship"))

        friendship = await self.friendship_service.accept_request(
            friendship_id, user_id
        )
        return AcceptFriendRequestResponse(
            friendship_id=str(friendship.id),
            friend_id=str(friendship.other(user_id)),
            status=friendship.status.value,
        )
