"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from devsocial.domain.model import User
from devsocial.domain.repository import UserRepository
from devsocial.domain.value import UserId, Username
from devsocial.persistence.database import storage_errors
from devsocial.persistence.mappers import row_to_user, user_to_dict
from devsocial.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_errors
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID, ordered by username."""
        if not user_ids:
            return []

        stmt = (
            select(users_table)
            .where(users_table.c.id.in_(user_ids))
            .order_by(func.lower(users_table.c.username))
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, case-insensitively."""
        stmt = select(users_table).where(
            func.lower(users_table.c.username) == username.key
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_errors
    async def find_by_api_key(self, api_key: str) -> Optional[User]:
        """Find the user owning an API key."""
        stmt = select(users_table).where(users_table.c.api_key == api_key)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @storage_errors
    async def search_by_username(
        self, query: str, exclude_user_id: UserId, limit: int
    ) -> list[User]:
        """Case-insensitive substring search on usernames."""
        stmt = (
            select(users_table)
            .where(
                and_(
                    func.lower(users_table.c.username).contains(
                        query.lower(), autoescape=True
                    ),
                    users_table.c.id != exclude_user_id,
                )
            )
            .order_by(func.lower(users_table.c.username))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        stmt = pg_insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={
                key: value
                for key, value in user_dict.items()
                if key not in ("id", "created_at")
            },
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return user
