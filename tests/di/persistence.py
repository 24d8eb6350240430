"""Mock persistence providers for testing."""

from dishka import Scope, provide

from devsocial.domain.repository import (
    AchievementRepository,
    ActivityRepository,
    FriendshipRepository,
    MessageRepository,
    UserRepository,
)
from devsocial.persistence.repository.inmemory import (
    InMemoryAchievementRepository,
    InMemoryActivityRepository,
    InMemoryFriendshipRepository,
    InMemoryMessageRepository,
    InMemoryUserRepository,
)
from devsocial.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories live as long as the container. Every test builds its own
    container, so tests stay isolated while API tests keep their data
    across requests.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_activity_repository(self) -> ActivityRepository:
        """Provide in-memory activity repository."""
        return InMemoryActivityRepository()

    @provide(scope=Scope.APP)
    def get_friendship_repository(self) -> FriendshipRepository:
        """Provide in-memory friendship repository."""
        return InMemoryFriendshipRepository()

    @provide(scope=Scope.APP)
    def get_achievement_repository(self) -> AchievementRepository:
        """Provide in-memory achievement repository."""
        return InMemoryAchievementRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        """Provide in-memory message repository."""
        return InMemoryMessageRepository()
