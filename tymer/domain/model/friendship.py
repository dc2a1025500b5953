"""Friendship entity."""

from datetime import datetime

from pydantic import Field, model_validator

from tymer.domain.model.common import DomainModel
from tymer.domain.value import FriendshipId, FriendshipStatus, UserId


class Friendship(DomainModel):
    """Undirected relation between two users, stored as a directed pair.

    `user_id` is the requester (or the invitation creator), `friend_id`
    the addressee. For any unordered pair at most one row exists, so
    lookups always check both orderings. Removing a friendship deletes
    the row; there is no declined state.
    """

    id: FriendshipId
    user_id: UserId
    friend_id: UserId
    status: FriendshipStatus = FriendshipStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def distinct_users(self) -> "Friendship":
        if self.user_id == self.friend_id:
            raise ValueError("A user cannot befriend themselves")
        return self

    @property
    def is_accepted(self) -> bool:
        return self.status == FriendshipStatus.ACCEPTED

    def involves(self, user_id: UserId) -> bool:
        """Whether the user is either side of the relation."""
        return user_id in (self.user_id, self.friend_id)

    def other(self, user_id: UserId) -> UserId:
        """The party that is not `user_id`."""
        return self.friend_id if user_id == self.user_id else self.user_id
