"""Domain value objects for Tymer."""

from tymer.domain.value.identifiers import (
    FriendshipId,
    InvitationId,
    MomentId,
    ReactionId,
    UserId,
)
from tymer.domain.value.types import (
    INVITE_CODE_ALPHABET,
    INVITE_CODE_LENGTH,
    AvatarColor,
    FriendshipStatus,
    InviteCode,
    ReactionKind,
)

__all__ = [
    # Identifiers
    "UserId",
    "MomentId",
    "ReactionId",
    "FriendshipId",
    "InvitationId",
    # Types
    "AvatarColor",
    "FriendshipStatus",
    "ReactionKind",
    "InviteCode",
    "INVITE_CODE_ALPHABET",
    "INVITE_CODE_LENGTH",
]
