"""Test configuration and helpers."""

import os
from uuid import uuid4

from tymer.domain.model import Profile
from tymer.domain.repository import ProfileRepository
from tymer.domain.value import AvatarColor, UserId

# Quiet console, no telemetry export from test runs
os.environ.setdefault("ENVIRONMENT", "test")


async def make_profile(
    profile_repository: ProfileRepository,
    display_name: str = "Léa",
    avatar_color: AvatarColor = AvatarColor.BLUE,
) -> Profile:
    """Save and return a fresh profile.

    Args:
        profile_repository: Repository to save into
        display_name: Display name
        avatar_color: Avatar color

    Returns:
        The saved profile
    """
    return await profile_repository.save(
        Profile(
            id=UserId(uuid4()),
            display_name=display_name,
            avatar_color=avatar_color,
        )
    )
