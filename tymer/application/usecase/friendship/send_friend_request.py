"""Send friend request use case."""

from datetime import datetime

from pydantic import BaseModel

from tymer.application.usecase.base import parse_id, require_user
from tymer.domain.service import FriendshipService
from tymer.domain.value import UserId


class SendFriendRequestRequest(BaseModel):
    """Send friend request request."""

    friend_id: str
    user_id: str | None  # From the session


class SendFriendRequestResponse(BaseModel):
    """Send friend request response."""

    friendship_id: str
    friend_id: str
    status: str
    created_at: datetime


class SendFriendRequestUseCase:
    """Use case for asking another user to become friends."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        """Initialize send friend request use case.

        Args:
            friendship_service: Friendship domain service
        """
        self.friendship_service = friendship_service

    async def execute(
        self, request: SendFriendRequestRequest
    ) -> SendFriendRequestResponse:
        """Create a pending request.

        Raises:
            NotAuthenticatedError: If there is no session user
            ValidationError: Self request or malformed id
            AlreadyFriendsError: Already friends
            FriendRequestExistsError: A request is already pending
        """
        user_id = require_user(request.user_id)
        friend_id = UserId(parse_id(request.friend_id, "user"))

        friendship = await self.friendship_service.send_request(user_id, friend_id)
        return SendFriendRequestResponse(
            friendship_id=str(friendship.id),
            friend_id=str(friendship.friend_id),
            status=friendship.status.value,
            created_at=friendship.created_at,
        )
