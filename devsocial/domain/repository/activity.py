"""Activity aggregate repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional, Sequence

from devsocial.domain.model.activity import ActivityDelta, DailyActivity, HourlyActivity
from devsocial.domain.value import UserId


class ActivityRepository(ABC):
    """Repository for daily and hourly activity aggregates.

    `merge` is the only write path. Implementations must make it an
    atomic upsert-and-add per (user, day) and (user, day, hour) key: N
    concurrent merges of deltas d1..dN must leave a total of sum(di).
    """

    @abstractmethod
    async def merge(
        self,
        user_id: UserId,
        day: date,
        hour: int,
        delta: ActivityDelta,
        at: datetime,
    ) -> DailyActivity:
        """Add a delta to the daily and hourly aggregates of a user.

        Creates the rows on first merge. Both rows are written or neither
        is.

        Args:
            user_id: Owner of the aggregates
            day: UTC calendar day of the merge
            hour: UTC hour (0-23) of the merge
            delta: Seconds and per-project/per-language seconds to add
            at: Wall-clock time stored as last_update

        Returns:
            The daily aggregate after the merge

        Raises:
            StorageError: If the store failed; nothing was applied
        """
        pass

    @abstractmethod
    async def find_daily(self, user_id: UserId, day: date) -> Optional[DailyActivity]:
        """Find the daily aggregate of a user for one day.

        Args:
            user_id: The user's ID
            day: UTC calendar day

        Returns:
            The aggregate if any activity was merged that day, None otherwise
        """
        pass

    @abstractmethod
    async def find_daily_between(
        self, user_id: UserId, start: date, end: date
    ) -> list[DailyActivity]:
        """Find daily aggregates with start <= day <= end, oldest first."""
        pass

    @abstractmethod
    async def find_all_daily(self, user_id: UserId) -> list[DailyActivity]:
        """Find every daily aggregate of a user, oldest first."""
        pass

    @abstractmethod
    async def find_hourly_between(
        self, user_id: UserId, start: date, end: date
    ) -> list[HourlyActivity]:
        """Find hourly aggregates with start <= day <= end."""
        pass

    @abstractmethod
    async def exists_hourly_activity(
        self, user_id: UserId, start_hour: int, end_hour: int
    ) -> bool:
        """Check for any hourly aggregate with activity in an hour range.

        Args:
            user_id: The user's ID
            start_hour: First hour included
            end_hour: First hour excluded

        Returns:
            True if some aggregate has start_hour <= hour < end_hour and
            total_seconds > 0 on any day
        """
        pass

    @abstractmethod
    async def find_daily_for_users(
        self, user_ids: Sequence[UserId], day: date
    ) -> dict[UserId, DailyActivity]:
        """Find the daily aggregates of several users for one day.

        Batch variant of `find_daily` for the friends feed.

        Args:
            user_ids: Users to look up
            day: UTC calendar day

        Returns:
            Aggregates keyed by user ID; users without activity that day
            are absent
        """
        pass
