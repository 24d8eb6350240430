"""PostgreSQL implementation of Achievement repository."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from devsocial.domain.model import AchievementUnlock
from devsocial.domain.repository import AchievementRepository
from devsocial.domain.value import UserId
from devsocial.persistence.database import storage_errors
from devsocial.persistence.mappers import row_to_achievement_unlock
from devsocial.persistence.tables import achievement_unlocks_table


class PostgresAchievementRepository(AchievementRepository):
    """PostgreSQL implementation of AchievementRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def find_unlocks(self, user_id: UserId) -> list[AchievementUnlock]:
        """Find every achievement a user unlocked, oldest first."""
        stmt = (
            select(achievement_unlocks_table)
            .where(achievement_unlocks_table.c.user_id == user_id)
            .order_by(achievement_unlocks_table.c.unlocked_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_achievement_unlock(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def save_unlock(self, unlock: AchievementUnlock) -> AchievementUnlock:
        """Record an unlock.

        Runs in a savepoint so a duplicate only rolls back this insert and
        the evaluation can go on.
        """
        stmt = insert(achievement_unlocks_table).values(**unlock.model_dump())
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return unlock

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Run the block inside SAVEPOINT / ROLLBACK TO SAVEPOINT.

        Rolling back to the savepoint also clears an aborted-transaction
        state, so later statements of the request still run.
        """
        async with self.session.begin_nested():
            yield
