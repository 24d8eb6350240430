"""PostgreSQL implementation of Activity repository."""

from datetime import date, datetime
from typing import Optional, Sequence

from sqlalchemy import Table, and_, literal_column, select
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from devsocial.domain.model import ActivityDelta, DailyActivity, HourlyActivity
from devsocial.domain.repository import ActivityRepository
from devsocial.domain.value import UserId
from devsocial.persistence.database import storage_errors
from devsocial.persistence.mappers import row_to_daily_activity, row_to_hourly_activity
from devsocial.persistence.tables import daily_activities_table, hourly_activities_table


def _merged_breakdown(table: Table, column: str):
    """Key-wise sum of the stored map and the incoming (excluded) map."""
    return literal_column(
        f"""COALESCE((
            SELECT jsonb_object_agg(entries.key, entries.total)
            FROM (
                SELECT merged.key, SUM(merged.value::bigint) AS total
                FROM (
                    SELECT key, value FROM jsonb_each_text({table.name}.{column})
                    UNION ALL
                    SELECT key, value FROM jsonb_each_text(excluded.{column})
                ) AS merged
                GROUP BY merged.key
            ) AS entries
        ), '{{}}'::jsonb)""",
        type_=JSONB,
    )


def _upsert_and_add(table: Table, values: dict, conflict_columns: list[str]):
    stmt = pg_insert(table).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=conflict_columns,
        set_={
            "total_seconds": table.c.total_seconds + stmt.excluded.total_seconds,
            "projects": _merged_breakdown(table, "projects"),
            "languages": _merged_breakdown(table, "languages"),
            "last_update": stmt.excluded.last_update,
        },
    ).returning(table)


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository.

    Merges are single INSERT ... ON CONFLICT DO UPDATE statements: the row
    lock taken by the upsert serializes concurrent merges per key.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def merge(
        self,
        user_id: UserId,
        day: date,
        hour: int,
        delta: ActivityDelta,
        at: datetime,
    ) -> DailyActivity:
        """Add a delta to the daily and hourly rows in one savepoint."""
        values = {
            "user_id": user_id,
            "date": day,
            "total_seconds": delta.seconds,
            "projects": delta.projects,
            "languages": delta.languages,
            "last_update": at,
        }

        async with self.session.begin_nested():
            result = await self.session.execute(
                _upsert_and_add(daily_activities_table, values, ["user_id", "date"])
            )
            daily_row = result.fetchone()
            await self.session.execute(
                _upsert_and_add(
                    hourly_activities_table,
                    {**values, "hour": hour},
                    ["user_id", "date", "hour"],
                )
            )

        return row_to_daily_activity(daily_row._asdict())

    @storage_errors
    async def find_daily(self, user_id: UserId, day: date) -> Optional[DailyActivity]:
        """Find the daily aggregate of a user for one day."""
        stmt = select(daily_activities_table).where(
            and_(
                daily_activities_table.c.user_id == user_id,
                daily_activities_table.c.date == day,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_daily_activity(row._asdict()) if row else None

    @storage_errors
    async def find_daily_for_users(
        self, user_ids: Sequence[UserId], day: date
    ) -> dict[UserId, DailyActivity]:
        """Find the daily aggregates of several users (batch query)."""
        if not user_ids:
            return {}

        stmt = select(daily_activities_table).where(
            and_(
                daily_activities_table.c.user_id.in_(user_ids),
                daily_activities_table.c.date == day,
            )
        )
        result = await self.session.execute(stmt)
        activities = [row_to_daily_activity(row._asdict()) for row in result.fetchall()]
        return {activity.user_id: activity for activity in activities}

    @storage_errors
    async def find_daily_between(
        self, user_id: UserId, start: date, end: date
    ) -> list[DailyActivity]:
        """Find daily aggregates in an inclusive date range, oldest first."""
        stmt = (
            select(daily_activities_table)
            .where(
                and_(
                    daily_activities_table.c.user_id == user_id,
                    daily_activities_table.c.date >= start,
                    daily_activities_table.c.date <= end,
                )
            )
            .order_by(daily_activities_table.c.date)
        )
        result = await self.session.execute(stmt)
        return [row_to_daily_activity(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def find_all_daily(self, user_id: UserId) -> list[DailyActivity]:
        """Find every daily aggregate of a user, oldest first."""
        stmt = (
            select(daily_activities_table)
            .where(daily_activities_table.c.user_id == user_id)
            .order_by(daily_activities_table.c.date)
        )
        result = await self.session.execute(stmt)
        return [row_to_daily_activity(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def find_hourly_between(
        self, user_id: UserId, start: date, end: date
    ) -> list[HourlyActivity]:
        """Find hourly aggregates in an inclusive date range."""
        stmt = (
            select(hourly_activities_table)
            .where(
                and_(
                    hourly_activities_table.c.user_id == user_id,
                    hourly_activities_table.c.date >= start,
                    hourly_activities_table.c.date <= end,
                )
            )
            .order_by(hourly_activities_table.c.date, hourly_activities_table.c.hour)
        )
        result = await self.session.execute(stmt)
        return [row_to_hourly_activity(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def exists_hourly_activity(
        self, user_id: UserId, start_hour: int, end_hour: int
    ) -> bool:
        """Check for activity in an hour range on any day."""
        stmt = (
            select(hourly_activities_table.c.user_id)
            .where(
                and_(
                    hourly_activities_table.c.user_id == user_id,
                    hourly_activities_table.c.hour >= start_hour,
                    hourly_activities_table.c.hour < end_hour,
                    hourly_activities_table.c.total_seconds > 0,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None
