"""In-memory repository implementations for testing."""

from .friendship import InMemoryFriendshipRepository
from .invitation import InMemoryInvitationRepository
from .moment import InMemoryMomentRepository
from .profile import InMemoryProfileRepository
from .reaction import InMemoryReactionRepository
from .window import InMemoryWindowRepository

__all__ = [
    "InMemoryFriendshipRepository",
    "InMemoryInvitationRepository",
    "InMemoryMomentRepository",
    "InMemoryProfileRepository",
    "InMemoryReactionRepository",
    "InMemoryWindowRepository",
]
