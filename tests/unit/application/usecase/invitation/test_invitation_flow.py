"""Tests for invitation use cases."""

import pytest

from tymer.application.usecase.friendship import ListFriendsRequest, ListFriendsUseCase
from tymer.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
    GetOrCreateInvitationRequest,
    GetOrCreateInvitationUseCase,
    ValidateInvitationRequest,
    ValidateInvitationUseCase,
)
from tymer.domain.error import InvitationNotFoundError
from tymer.domain.repository import ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInvitationFlow:
    """Share a code, check it, redeem it."""

    @pytest.mark.asyncio
    async def test_share_validate_accept(self, unit_env):
        profiles = await unit_env.get(ProfileRepository)
        lea = await make_profile(profiles, "Léa")
        hugo = await make_profile(profiles, "Hugo")
        get_or_create = await unit_env.get(GetOrCreateInvitationUseCase)
        validate = await unit_env.get(ValidateInvitationUseCase)
        accept = await unit_env.get(AcceptInvitationUseCase)
        list_friends = await unit_env.get(ListFriendsUseCase)

        shared = await get_or_create.execute(
            GetOrCreateInvitationRequest(user_id=str(lea.id))
        )
        checked = await validate.execute(
            ValidateInvitationRequest(code=shared.code.lower(), user_id=str(hugo.id))
        )
        accepted = await accept.execute(
            AcceptInvitationRequest(code=shared.code, user_id=str(hugo.id))
        )
        friends = await list_friends.execute(ListFriendsRequest(user_id=str(hugo.id)))

        assert len(shared.code) == 8
        assert checked.valid is True
        assert checked.creator.display_name == "Léa"
        assert accepted.friend.user_id == str(lea.id)
        assert accepted.friend.initials == "L"
        assert [f.display_name for f in friends.friends] == ["Léa"]

    @pytest.mark.asyncio
    async def test_used_code_reported_invalid(self, unit_env):
        profiles = await unit_env.get(ProfileRepository)
        lea = await make_profile(profiles, "Léa")
        hugo = await make_profile(profiles, "Hugo")
        ines = await make_profile(profiles, "Inès")
        get_or_create = await unit_env.get(GetOrCreateInvitationUseCase)
        validate = await unit_env.get(ValidateInvitationUseCase)
        accept = await unit_env.get(AcceptInvitationUseCase)

        shared = await get_or_create.execute(
            GetOrCreateInvitationRequest(user_id=str(lea.id))
        )
        await accept.execute(AcceptInvitationRequest(code=shared.code, user_id=str(hugo.id)))

        checked = await validate.execute(
            ValidateInvitationRequest(code=shared.code, user_id=str(ines.id))
        )
        assert checked.valid is False
        assert checked.creator is None
        with pytest.raises(InvitationNotFoundError):
            await accept.execute(
                AcceptInvitationRequest(code=shared.code, user_id=str(ines.id))
            )
