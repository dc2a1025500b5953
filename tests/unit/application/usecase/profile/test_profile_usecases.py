"""Tests for profile use cases."""

import pytest

from tymer.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UploadAvatarRequest,
    UploadAvatarUseCase,
)
from tymer.domain.error import NotAuthenticatedError
from tymer.domain.repository import ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProfileUseCases:
    """Read and edit the signed-in profile."""

    @pytest.mark.asyncio
    async def test_edit_profile(self, unit_env):
        profiles = await unit_env.get(ProfileRepository)
        lea = await make_profile(profiles, "léa")
        get = await unit_env.get(GetProfileUseCase)
        update = await unit_env.get(UpdateProfileUseCase)
        upload = await unit_env.get(UploadAvatarUseCase)

        before = await get.execute(GetProfileRequest(user_id=str(lea.id)))
        updated = await update.execute(
            UpdateProfileRequest(
                user_id=str(lea.id), display_name="Léa", avatar_color="teal"
            )
        )
        with_avatar = await upload.execute(
            UploadAvatarRequest(user_id=str(lea.id), image=b"\xff\xd8avatar")
        )

        assert before.initials == "L"
        assert before.avatar_color == "blue"
        assert before.avatar_url is None
        assert updated.display_name == "Léa"
        assert updated.avatar_color == "teal"
        assert with_avatar.avatar_url.endswith("/avatar.jpg")

    @pytest.mark.asyncio
    async def test_signed_out(self, unit_env):
        get = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotAuthenticatedError):
            await get.execute(GetProfileRequest(user_id=None))
