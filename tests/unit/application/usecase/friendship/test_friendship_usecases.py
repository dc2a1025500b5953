"""Tests for friendship use cases."""

from uuid import uuid4

import pytest

from tymer.application.usecase.friendship import (
    AcceptFriendRequestRequest,
    AcceptFriendRequestUseCase,
    ListFriendRequestsRequest,
    ListFriendRequestsUseCase,
    ListFriendsRequest,
    ListFriendsUseCase,
    RemoveFriendRequest,
    RemoveFriendUseCase,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)
from tymer.domain.error import NotFoundError, ValidationError
from tymer.domain.repository import ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFriendRequests:
    """Request, accept, list, remove."""

    @pytest.mark.asyncio
    async def test_request_lifecycle(self, unit_env):
        profiles = await unit_env.get(ProfileRepository)
        lea = await make_profile(profiles, "Léa")
        hugo = await make_profile(profiles, "Hugo")
        send = await unit_env.get(SendFriendRequestUseCase)
        list_requests = await unit_env.get(ListFriendRequestsUseCase)
        accept = await unit_env.get(AcceptFriendRequestUseCase)
        list_friends = await unit_env.get(ListFriendsUseCase)
        remove = await unit_env.get(RemoveFriendUseCase)

        sent = await send.execute(
            SendFriendRequestRequest(friend_id=str(hugo.id), user_id=str(lea.id))
        )
        incoming = await list_requests.execute(
            ListFriendRequestsRequest(user_id=str(hugo.id))
        )
        accepted = await accept.execute(
            AcceptFriendRequestRequest(
                friendship_id=sent.friendship_id, user_id=str(hugo.id)
            )
        )
        friends = await list_friends.execute(ListFriendsRequest(user_id=str(lea.id)))
        removed = await remove.execute(
            RemoveFriendRequest(friendship_id=sent.friendship_id, user_id=str(lea.id))
        )
        after = await list_friends.execute(ListFriendsRequest(user_id=str(lea.id)))

        assert sent.status == "pending"
        assert [r.requester.display_name for r in incoming.requests] == ["Léa"]
        assert accepted.status == "accepted"
        assert accepted.friend_id == str(lea.id)
        assert [f.display_name for f in friends.friends] == ["Hugo"]
        assert removed.removed is True
        assert after.friends == []

    @pytest.mark.asyncio
    async def test_request_to_unknown_user(self, unit_env):
        profiles = await unit_env.get(ProfileRepository)
        lea = await make_profile(profiles)
        send = await unit_env.get(SendFriendRequestUseCase)

        with pytest.raises(NotFoundError):
            await send.execute(
                SendFriendRequestRequest(friend_id=str(uuid4()), user_id=str(lea.id))
            )
        with pytest.raises(ValidationError):
            await send.execute(
                SendFriendRequestRequest(friend_id="hugo", user_id=str(lea.id))
            )
