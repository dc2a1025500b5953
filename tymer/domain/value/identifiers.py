"""Strongly typed identifiers for Tymer domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
MomentId = NewType("MomentId", UUID)
ReactionId = NewType("ReactionId", UUID)
FriendshipId = NewType("FriendshipId", UUID)
InvitationId = NewType("InvitationId", UUID)
