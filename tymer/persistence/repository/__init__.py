"""PostgreSQL repository implementations."""

from tymer.persistence.repository.friendship import PostgresFriendshipRepository
from tymer.persistence.repository.invitation import PostgresInvitationRepository
from tymer.persistence.repository.moment import PostgresMomentRepository
from tymer.persistence.repository.profile import PostgresProfileRepository
from tymer.persistence.repository.reaction import PostgresReactionRepository
from tymer.persistence.repository.window import PostgresWindowRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresWindowRepository",
    "PostgresMomentRepository",
    "PostgresReactionRepository",
    "PostgresFriendshipRepository",
    "PostgresInvitationRepository",
]
