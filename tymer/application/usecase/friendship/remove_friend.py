"""Remove friend use case."""

from pydantic import BaseModel

from tymer.application.usecase.base import parse_id, require_user
from tymer.domain.service import FriendshipService
from tymer.domain.value import FriendshipId


class RemoveFriendRequest(BaseModel):
    """Remove friend request."""

    friendship_id: str
    user_id: str | None  # From the session


class RemoveFriendResponse(BaseModel):
    """Remove friend response."""

    friendship_id: str
    removed: bool = True


class RemoveFriendUseCase:
    """Use case for ending a friendship or withdrawing a request.

    Either party may remove the row; there is no declined state.
    """

    def __init__(self, friendship_service: FriendshipService) -> None:
        """Initialize remove friend use case.

        Args:
            friendship_service: Friendship domain service
        """
        self.friendship_service = friendship_service

    async def execute(self, request: RemoveFriendRequest) -> RemoveFriendResponse:
        user_id = require_user(request.user_id)
        friendship_id = FriendshipId(parse_id(request.friendship_id, "friendship"))

        await self.friendship_service.remove(friendship_id, user_id)
        return RemoveFriendResponse(friendship_id=str(friendship_id))
