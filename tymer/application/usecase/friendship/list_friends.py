"""List friends use case."""

from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.application.usecase.common import ProfileItem
from tymer.domain.service import FriendshipService


class ListFriendsRequest(BaseModel):
    """List friends request."""

    user_id: str | None  # From the session


class ListFriendsResponse(BaseModel):
    """List friends response."""

    friends: list[ProfileItem]


class ListFriendsUseCase:
    """Use case for listing the user's accepted friends."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        """Initialize list friends use case.

        Args:
            friendship_service: Friendship domain service
        """
        self.friendship_service = friendship_service

    async def execute(self, request: ListFriendsRequest) -> ListFriendsResponse:
        user_id = require_user(request.user_id)
        friends = await self.friendship_service.list_friends(user_id)
        return ListFriendsResponse(
            friends=[ProfileItem.from_profile(p) for p in friends]
        )
