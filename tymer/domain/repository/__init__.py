"""Repository interfaces for Tymer domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tymer.domain.repository.friendship import FriendshipRepository
from tymer.domain.repository.invitation import InvitationRepository
from tymer.domain.repository.moment import MomentRepository
from tymer.domain.repository.profile import ProfileRepository
from tymer.domain.repository.reaction import ReactionRepository
from tymer.domain.repository.window import WindowRepository

__all__ = [
    "ProfileRepository",
    "WindowRepository",
    "MomentRepository",
    "ReactionRepository",
    "FriendshipRepository",
    "InvitationRepository",
]
