"""In-memory activity repository for testing."""

from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from devsocial.domain.model import ActivityDelta, DailyActivity, HourlyActivity
from devsocial.domain.repository.activity import ActivityRepository
from devsocial.domain.value import UserId


def _add(current: Mapping[str, int], incoming: Mapping[str, int]) -> dict[str, int]:
    merged = dict(current)
    for key, seconds in incoming.items():
        merged[key] = merged.get(key, 0) + seconds
    return merged


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing.

    `merge` never awaits between reading and writing, so it is atomic on
    a single event loop.
    """

    def __init__(self) -> None:
        self._daily: dict[tuple[UserId, date], DailyActivity] = {}
        self._hourly: dict[tuple[UserId, date, int], HourlyActivity] = {}

    async def merge(
        self,
        user_id: UserId,
        day: date,
        hour: int,
        delta: ActivityDelta,
        at: datetime,
    ) -> DailyActivity:
        """Add a delta to the daily and hourly aggregates."""
        daily = self._daily.get((user_id, day)) or DailyActivity(
            user_id=user_id, day=day, last_update=at
        )
        hourly = self._hourly.get((user_id, day, hour)) or HourlyActivity(
            user_id=user_id, day=day, hour=hour, last_update=at
        )

        daily = daily.model_copy(
            update={
                "total_seconds": daily.total_seconds + delta.seconds,
                "projects": _add(daily.projects, delta.projects),
                "languages": _add(daily.languages, delta.languages),
                "last_update": at,
            }
        )
        hourly = hourly.model_copy(
            update={
                "total_seconds": hourly.total_seconds + delta.seconds,
                "projects": _add(hourly.projects, delta.projects),
                "languages": _add(hourly.languages, delta.languages),
                "last_update": at,
            }
        )

        self._daily[(user_id, day)] = daily
        self._hourly[(user_id, day, hour)] = hourly
        return daily

    async def find_daily(self, user_id: UserId, day: date) -> Optional[DailyActivity]:
        """Find the daily aggregate of a user for one day."""
        return self._daily.get((user_id, day))

    async def find_daily_for_users(
        self, user_ids: Sequence[UserId], day: date
    ) -> dict[UserId, DailyActivity]:
        """Find the daily aggregates of several users for one day."""
        return {
            user_id: self._daily[(user_id, day)]
            for user_id in user_ids
            if (user_id, day) in self._daily
        }

    async def find_daily_between(
        self, user_id: UserId, start: date, end: date
    ) -> list[DailyActivity]:
        """Find daily aggregates in an inclusive date range, oldest first."""
        return [
            a
            for a in await self.find_all_daily(user_id)
            if start <= a.day <= end
        ]

    async def find_all_daily(self, user_id: UserId) -> list[DailyActivity]:
        """Find every daily aggregate of a user, oldest first."""
        return sorted(
            (a for (owner, _), a in self._daily.items() if owner == user_id),
            key=lambda a: a.day,
        )

    async def find_hourly_between(
        self, user_id: UserId, start: date, end: date
    ) -> list[HourlyActivity]:
        """Find hourly aggregates in an inclusive date range."""
        return sorted(
            (
                a
                for (owner, day, _), a in self._hourly.items()
                if owner == user_id and start <= day <= end
            ),
            key=lambda a: (a.day, a.hour),
        )

    async def exists_hourly_activity(
        self, user_id: UserId, start_hour: int, end_hour: int
    ) -> bool:
        """Check for activity in an hour range on any day."""
        return any(
            owner == user_id and start_hour <= hour < end_hour and a.total_seconds > 0
            for (owner, _, hour), a in self._hourly.items()
        )
