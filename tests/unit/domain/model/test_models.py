"""Unit tests for domain entities."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from tymer.domain.model import Friendship, Profile, TimeWindow
from tymer.domain.value import FriendshipId, UserId


def test_friendship_needs_two_users():
    user = UserId(uuid4())

    with pytest.raises(ValidationError):
        Friendship(id=FriendshipId(uuid4()), user_id=user, friend_id=user)


def test_friendship_other_side():
    a, b = UserId(uuid4()), UserId(uuid4())
    friendship = Friendship(id=FriendshipId(uuid4()), user_id=a, friend_id=b)

    assert friendship.other(a) == b
    assert friendship.other(b) == a
    assert friendship.involves(a)
    assert not friendship.involves(UserId(uuid4()))


def test_profile_initials():
    profile = Profile(id=UserId(uuid4()), display_name="élodie")

    assert profile.initials == "É"


@pytest.mark.parametrize(("start", "end"), [(-1, 9), (8, 24)])
def test_window_hours_bounded(start, end):
    with pytest.raises(ValidationError):
        TimeWindow(label="Hors limites", start=start, end=end)
