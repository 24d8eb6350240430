"""In-memory achievement repository for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError

from devsocial.domain.model import AchievementUnlock
from devsocial.domain.repository.achievement import AchievementRepository
from devsocial.domain.value import UserId


class InMemoryAchievementRepository(AchievementRepository):
    """In-memory implementation of AchievementRepository for testing."""

    def __init__(self) -> None:
        self._unlocks: list[AchievementUnlock] = []

    async def find_unlocks(self, user_id: UserId) -> list[AchievementUnlock]:
        """Find every achievement a user unlocked, oldest first."""
        return sorted(
            (u for u in self._unlocks if u.user_id == user_id),
            key=lambda u: u.unlocked_at,
        )

    async def save_unlock(self, unlock: AchievementUnlock) -> AchievementUnlock:
        """Record an unlock.

        Raises:
            IntegrityError: If the user already unlocked this achievement
        """
        for existing in self._unlocks:
            if (
                existing.user_id == unlock.user_id
                and existing.achievement_id == unlock.achievement_id
            ):
                raise IntegrityError("Duplicate unlock", None, Exception())
        self._unlocks.append(unlock)
        return unlock

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Undo unlocks recorded in the block if it raises."""
        saved = list(self._unlocks)
        try:
            yield
        except Exception:
            self._unlocks = saved
            raise
