"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from devsocial.config import Settings
from devsocial.domain.repository import (
    AchievementRepository,
    ActivityRepository,
    FriendshipRepository,
    MessageRepository,
    UserRepository,
)
from devsocial.persistence.database import create_engine, create_session_factory
from devsocial.persistence.repository import (
    PostgresAchievementRepository,
    PostgresActivityRepository,
    PostgresFriendshipRepository,
    PostgresMessageRepository,
    PostgresUserRepository,
)
from devsocial.util.di.base import ProviderBase
from devsocial.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

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
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_activity_repository(self, session: AsyncSession) -> ActivityRepository:
        """Provide Activity repository."""
        return PostgresActivityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_friendship_repository(self, session: AsyncSession) -> FriendshipRepository:
        """Provide Friendship repository."""
        return PostgresFriendshipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_achievement_repository(
        self, session: AsyncSession
    ) -> AchievementRepository:
        """Provide Achievement repository."""
        return PostgresAchievementRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        """Provide Message repository."""
        return PostgresMessageRepository(session)
