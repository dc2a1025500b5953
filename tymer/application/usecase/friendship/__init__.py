"""Friendship use cases."""

from .accept_friend_request import (
    AcceptFriendRequestRequest,
    AcceptFriendRequestResponse,
    AcceptFriendRequestUseCase,
)
from .list_friend_requests import (
    FriendRequestItem,
    ListFriendRequestsRequest,
    ListFriendRequestsResponse,
    ListFriendRequestsUseCase,
)
from .list_friends import ListFriendsRequest, ListFriendsResponse, ListFriendsUseCase
from .remove_friend import RemoveFriendRequest, RemoveFriendResponse, RemoveFriendUseCase
from .send_friend_request import (
    SendFriendRequestRequest,
    SendFriendRequestResponse,
    SendFriendRequestUseCase,
)

__all__ = [
    "AcceptFriendRequestRequest",
    "AcceptFriendRequestResponse",
    "AcceptFriendRequestUseCase",
    "FriendRequestItem",
    "ListFriendRequestsRequest",
    "ListFriendRequestsResponse",
    "ListFriendRequestsUseCase",
    "ListFriendsRequest",
    "ListFriendsResponse",
    "ListFriendsUseCase",
    "RemoveFriendRequest",
    "RemoveFriendResponse",
    "RemoveFriendUseCase",
    "SendFriendRequestRequest",
    "SendFriendRequestResponse",
    "SendFriendRequestUseCase",
]
