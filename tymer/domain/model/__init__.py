"""Domain model entities for Tymer."""

from tymer.domain.model.friendship import Friendship
from tymer.domain.model.invitation import Invitation
from tymer.domain.model.moment import (
    Moment,
    Reaction,
    ReactionContent,
    TextReaction,
    VoiceReaction,
)
from tymer.domain.model.profile import Profile
from tymer.domain.model.window import TimeWindow

__all__ = [
    "Profile",
    "TimeWindow",
    "Moment",
    "Reaction",
    "ReactionContent",
    "TextReaction",
    "VoiceReaction",
    "Friendship",
    "Invitation",
]
