"""Activity merger and rollups."""

import math
from collections import defaultdict
from datetime import date, timedelta
from typing import Mapping, Optional

import logfire

from devsocial.config import RollupSettings
from devsocial.domain.error import ValidationError
from devsocial.domain.model import (
    ActivityDelta,
    DailyActivity,
    DailyTotal,
    HourlyBucket,
    LanguageShare,
)
from devsocial.domain.repository import ActivityRepository
from devsocial.domain.value import UserId
from devsocial.util.clock import Clock

from .base import Service

MAX_BREAKDOWN_KEY_LENGTH = 255
# One report never covers more than a day
MAX_REPORT_SECONDS = 86_400
WEEK_DAYS = 7


def normalize_seconds(value: object, field: str = "seconds") -> int:
    """Validate a reported duration and round it to whole seconds.

    Raises:
        ValidationError: If the value is not a finite number between 0 and
            MAX_REPORT_SECONDS
    """
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a number")
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{field} must be a finite non-negative number")
    if value > MAX_REPORT_SECONDS:
        raise ValidationError(f"{field} must be at most {MAX_REPORT_SECONDS} seconds")
    return int(round(value))


def normalize_breakdown(
    breakdown: Optional[Mapping[str, object]], field: str
) -> dict[str, int]:
    """Validate a name -> seconds map."""
    if breakdown is None:
        return {}
    if not isinstance(breakdown, Mapping):
        raise ValidationError(f"{field} must be a mapping of name to seconds")

    result: dict[str, int] = {}
    for key, value in breakdown.items():
        if not isinstance(key, str) or not key.strip():
            raise ValidationError(f"{field} keys must be non-empty strings")
        if len(key) > MAX_BREAKDOWN_KEY_LENGTH:
            raise ValidationError(
                f"{field} keys must be at most {MAX_BREAKDOWN_KEY_LENGTH} characters"
            )
        result[key] = normalize_seconds(value, f"{field}[{key}]")
    return result


class ActivityService(Service):
    """Merges activity reports into aggregates and reads them back."""

    def __init__(
        self,
        activity_repository: ActivityRepository,
        clock: Clock,
        rollup_settings: RollupSettings,
    ) -> None:
        """Initialize activity service.

        Args:
            activity_repository: Aggregate store
            clock: Wall-clock source, decides "today" and the hour bucket
            rollup_settings: Lookback caps for rollups
        """
        self.activity_repository = activity_repository
        self.clock = clock
        self.rollup_settings = rollup_settings

    async def merge_activity(
        self,
        user_id: UserId,
        seconds: object,
        projects: Optional[Mapping[str, object]] = None,
        languages: Optional[Mapping[str, object]] = None,
    ) -> DailyActivity:
        """Add an activity report to today's daily and hourly aggregates.

        Totals and per-key seconds are added to what is stored, never
        replaced. The hour bucket is the current UTC hour at merge time.

        Args:
            user_id: Reporting user
            seconds: Active seconds since the previous report
            projects: Seconds per project name
            languages: Seconds per language name

        Returns:
            Today's aggregate after the merge

        Raises:
            ValidationError: If any duration is negative, not finite or not
                a number, or a breakdown key is empty
            StorageError: If the store failed; nothing was applied
        """
        with logfire.span("activity_service.merge_activity", user_id=str(user_id)):
            delta = ActivityDelta(
                seconds=normalize_seconds(seconds),
                projects=normalize_breakdown(projects, "projects"),
                languages=normalize_breakdown(languages, "languages"),
            )

            now = self.clock.now()
            daily = await self.activity_repository.merge(
                user_id, now.date(), now.hour, delta, now
            )
            logfire.info(
                "Activity merged",
                user_id=str(user_id),
                day=daily.date_key,
                hour=now.hour,
                seconds=delta.seconds,
                total_seconds=daily.total_seconds,
            )
            return daily

    async def get_today(self, user_id: UserId) -> Optional[DailyActivity]:
        """Today's aggregate, None if nothing was merged today."""
        return await self.activity_repository.find_daily(
            user_id, self.clock.now().date()
        )

    async def get_week_total(self, user_id: UserId) -> int:
        """Seconds over the last 7 calendar days, today included."""
        with logfire.span("activity_service.get_week_total", user_id=str(user_id)):
            today = self.clock.now().date()
            days = await self.activity_repository.find_daily_between(
                user_id, today - timedelta(days=WEEK_DAYS - 1), today
            )
            return sum(day.total_seconds for day in days)

    def _window(self, days: int, cap: int) -> tuple[date, date]:
        if days < 1:
            raise ValidationError("days must be at least 1")
        days = min(days, cap)
        today = self.clock.now().date()
        return today - timedelta(days=days - 1), today

    async def get_hourly_activity(self, user_id: UserId, days: int) -> list[HourlyBucket]:
        """Seconds per hour-of-day summed over the window.

        Args:
            user_id: The user's ID
            days: Window length ending today, clamped to the hourly cap

        Returns:
            24 buckets, hour 0 to 23

        Raises:
            ValidationError: If days < 1
        """
        with logfire.span(
            "activity_service.get_hourly_activity", user_id=str(user_id), days=days
        ):
            start, end = self._window(days, self.rollup_settings.max_hourly_days)
            rows = await self.activity_repository.find_hourly_between(
                user_id, start, end
            )

            totals = [0] * 24
            for row in rows:
                totals[row.hour] += row.total_seconds
            return [
                HourlyBucket(hour=hour, total_seconds=seconds)
                for hour, seconds in enumerate(totals)
            ]

    async def get_daily_history(self, user_id: UserId, days: int) -> list[DailyTotal]:
        """One entry per day of the window, oldest first, zero-filled.

        Raises:
            ValidationError: If days < 1
        """
        with logfire.span(
            "activity_service.get_daily_history", user_id=str(user_id), days=days
        ):
            start, end = self._window(days, self.rollup_settings.max_daily_days)
            rows = await self.activity_repository.find_daily_between(
                user_id, start, end
            )
            by_day = {row.day: row.total_seconds for row in rows}

            history = []
            day = start
            while day <= end:
                history.append(DailyTotal(day=day, total_seconds=by_day.get(day, 0)))
                day += timedelta(days=1)
            return history

    async def get_language_distribution(
        self, user_id: UserId, days: int
    ) -> list[LanguageShare]:
        """Languages by seconds over the window, descending, with their share.

        Raises:
            ValidationError: If days < 1
        """
        with logfire.span(
            "activity_service.get_language_distribution",
            user_id=str(user_id),
            days=days,
        ):
            start, end = self._window(days, self.rollup_settings.max_language_days)
            rows = await self.activity_repository.find_daily_between(
                user_id, start, end
            )

            totals: dict[str, int] = defaultdict(int)
            for row in rows:
                for language, seconds in row.languages.items():
                    totals[language] += seconds

            grand_total = sum(totals.values())
            if not grand_total:
                return []

            ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
            return [
                LanguageShare(
                    language=language,
                    total_seconds=seconds,
                    share=seconds / grand_total,
                )
                for language, seconds in ranked
                if seconds > 0
            ]
