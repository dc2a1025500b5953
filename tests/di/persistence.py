"""Mock persistence providers for testing."""

from dishka import Scope, provide

from tymer.domain.model import TimeWindow
from tymer.domain.repository import (
    FriendshipRepository,
    InvitationRepository,
    MomentRepository,
    ProfileRepository,
    ReactionRepository,
    WindowRepository,
)
from tymer.persistence.repository.inmemory import (
    InMemoryInvitationRepository,
    InMemoryProfileRepository,
    InMemoryWindowRepository,
)
from tymer.util.di.infrastructure.persistence import PersistenceProvider

from .faults import (
    FlakyFriendshipRepository,
    FlakyMomentRepository,
    FlakyReactionRepository,
)

# Window table contents seen by tests
TEST_WINDOWS = [
    TimeWindow(label="Matin", start=8, end=9),
    TimeWindow(label="Midi", start=12, end=13),
    TimeWindow(label="Soir", start=19, end=20),
]


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()

    @provide(scope=Scope.REQUEST)
    def get_window_repository(self) -> WindowRepository:
        """Provide in-memory window repository."""
        return InMemoryWindowRepository(TEST_WINDOWS)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(
        self, profile_repository: ProfileRepository
    ) -> ReactionRepository:
        """Provide in-memory reaction repository."""
        return FlakyReactionRepository(profile_repository)

    @provide(scope=Scope.REQUEST)
    def get_moment_repository(
        self,
        profile_repository: ProfileRepository,
        reaction_repository: ReactionRepository,
    ) -> MomentRepository:
        """Provide in-memory moment repository."""
        return FlakyMomentRepository(profile_repository, reaction_repository)

    @provide(scope=Scope.REQUEST)
    def get_friendship_repository(self) -> FriendshipRepository:
        """Provide in-memory friendship repository."""
        return FlakyFriendshipRepository()

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository()
