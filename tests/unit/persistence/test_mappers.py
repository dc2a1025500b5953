"""Unit tests for row mappers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from tymer.domain.model import TextReaction, VoiceReaction
from tymer.domain.value import AvatarColor, FriendshipStatus
from tymer.persistence.mappers import (
    invitation_to_dict,
    moment_to_dict,
    reaction_to_dict,
    row_to_friendship,
    row_to_invitation,
    row_to_moment,
    row_to_profile,
    row_to_reaction,
    row_to_window,
)

NOW = datetime(2026, 3, 14, 12, 30, tzinfo=timezone(timedelta(hours=1)))


def test_profile_with_unknown_color_reads_as_blue():
    profile = row_to_profile(
        {
            "id": str(uuid4()),
            "display_name": "Léa",
            "avatar_color": "chartreuse",
            "avatar_url": None,
            "created_at": NOW,
            "updated_at": NOW,
        }
    )

    assert profile.avatar_color == AvatarColor.BLUE


def test_window_row():
    window = row_to_window({"id": 1, "label": "Matin", "start_hour": 8, "end_hour": 9})

    assert (window.label, window.start, window.end) == ("Matin", 8, 9)


def test_reaction_rows_by_kind():
    base = {
        "id": uuid4(),
        "moment_id": uuid4(),
        "author_id": uuid4(),
        "created_at": NOW,
        "content": None,
        "audio_path": None,
        "duration": None,
        "waveform": None,
    }

    text = row_to_reaction({**base, "kind": "text", "content": "Bravo"})
    voice = row_to_reaction(
        {
            **base,
            "kind": "voice",
            "audio_path": "u/1.m4a",
            "duration": 2.0,
            "waveform": [0.5],
        }
    )

    assert isinstance(text.content, TextReaction)
    assert isinstance(voice.content, VoiceReaction)
    assert reaction_to_dict(text)["content"] == "Bravo"
    assert reaction_to_dict(text)["audio_path"] is None
    assert reaction_to_dict(voice)["kind"] == "voice"
    assert reaction_to_dict(voice)["waveform"] == [0.5]


def test_moment_columns_exclude_projections():
    moment = row_to_moment(
        {
            "id": uuid4(),
            "author_id": uuid4(),
            "image_path": None,
            "description": "Coucou",
            "captured_at": NOW,
            "created_at": NOW,
        }
    )

    data = moment_to_dict(moment)

    assert "author" not in data
    assert "reactions" not in data
    assert data["description"] == "Coucou"


def test_friendship_and_invitation_rows():
    friendship = row_to_friendship(
        {
            "id": uuid4(),
            "user_id": uuid4(),
            "friend_id": uuid4(),
            "status": "accepted",
            "created_at": NOW,
        }
    )
    invitation = row_to_invitation(
        {
            "id": uuid4(),
            "creator_id": uuid4(),
            "code": "AB3XQ9KZ",
            "is_used": False,
            "expires_at": NOW,
            "created_at": NOW,
            "used_by": None,
            "used_at": None,
        }
    )

    assert friendship.status == FriendshipStatus.ACCEPTED
    assert invitation.code.root == "AB3XQ9KZ"
    assert invitation_to_dict(invitation)["code"] == "AB3XQ9KZ"
    assert invitation.is_active(NOW - timedelta(seconds=1)) is True
    assert invitation.is_active(NOW) is False
