"""Achievement unlock repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from devsocial.domain.model.achievement import AchievementUnlock
from devsocial.domain.value import UserId


class AchievementRepository(ABC):
    """Repository for achievement unlock records."""

    @abstractmethod
    async def find_unlocks(self, user_id: UserId) -> list[AchievementUnlock]:
        """Find every achievement a user unlocked, oldest first."""
        pass

    @abstractmethod
    async def save_unlock(self, unlock: AchievementUnlock) -> AchievementUnlock:
        """Record an unlock.

        Raises:
            IntegrityError: If the user already unlocked this achievement
        """
        pass

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Scope whose writes are undone if it exits with an exception.

        The surrounding unit of work stays usable afterwards, so a failed
        evaluation does not take the caller's earlier writes down with it.
        """
        pass
