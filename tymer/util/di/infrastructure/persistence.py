"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tymer.config import Settings
from tymer.domain.repository import (
    FriendshipRepository,
    InvitationRepository,
    MomentRepository,
    ProfileRepository,
    ReactionRepository,
    WindowRepository,
)
from tymer.persistence.database import create_engine, create_session_factory
from tymer.persistence.repository import (
    PostgresFriendshipRepository,
    PostgresInvitationRepository,
    PostgresMomentRepository,
    PostgresProfileRepository,
    PostgresReactionRepository,
    PostgresWindowRepository,
)
from tymer.util.di.base import ProviderBase
from tymer.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        An invitation redemption therefore lands as one transaction.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_window_repository(self, session: AsyncSession) -> WindowRepository:
        """Provide Window repository."""
        return PostgresWindowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(
        self, session: AsyncSession, profile_repository: ProfileRepository
    ) -> ReactionRepository:
        """Provide Reaction repository."""
        return PostgresReactionRepository(session, profile_repository)

    @provide(scope=Scope.REQUEST)
    def get_moment_repository(
        self,
        session: AsyncSession,
        profile_repository: ProfileRepository,
        reaction_repository: ReactionRepository,
    ) -> MomentRepository:
        """Provide Moment repository."""
        return PostgresMomentRepository(
            session, profile_repository, reaction_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_friendship_repository(self, session: AsyncSession) -> FriendshipRepository:
        """Provide Friendship repository."""
        return PostgresFriendshipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(
        self, session: AsyncSession
    ) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)
