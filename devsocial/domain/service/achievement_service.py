"""Achievement evaluator."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from devsocial.domain.model import Achievement, AchievementUnlock, DailyActivity
from devsocial.domain.repository import (
    AchievementRepository,
    ActivityRepository,
    FriendshipRepository,
)
from devsocial.domain.value import ThresholdType, UserId
from devsocial.util.clock import Clock

from .achievement_catalog import ACHIEVEMENTS
from .base import Service

SECONDS_PER_HOUR = 3600
NIGHT_HOURS = (0, 5)
EARLY_HOURS = (5, 7)
SATURDAY = 5
SUNDAY = 6


@dataclass
class AchievementStatus:
    """A catalog entry and whether the user unlocked it."""

    achievement: Achievement
    unlocked_at: Optional[datetime] = None

    @property
    def unlocked(self) -> bool:
        return self.unlocked_at is not None


def streak_days(active_days: set[date], today: date) -> int:
    """Consecutive active days ending today. 0 if today is not active."""
    streak = 0
    day = today
    while day in active_days:
        streak += 1
        day -= timedelta(days=1)
    return streak


class _Measures:
    """Measures of one user, loaded lazily and once per evaluation."""

    def __init__(
        self,
        user_id: UserId,
        today: date,
        activity_repository: ActivityRepository,
        friendship_repository: FriendshipRepository,
    ) -> None:
        self.user_id = user_id
        self.today = today
        self.activity_repository = activity_repository
        self.friendship_repository = friendship_repository
        self._daily: Optional[list[DailyActivity]] = None
        self._friend_count: Optional[int] = None
        self._hour_ranges: dict[tuple[int, int], bool] = {}

    async def daily(self) -> list[DailyActivity]:
        if self._daily is None:
            self._daily = await self.activity_repository.find_all_daily(self.user_id)
        return self._daily

    async def friend_count(self) -> int:
        if self._friend_count is None:
            self._friend_count = await self.friendship_repository.count_friends(
                self.user_id
            )
        return self._friend_count

    async def coded_between(self, hours: tuple[int, int]) -> bool:
        if hours not in self._hour_ranges:
            self._hour_ranges[hours] = (
                await self.activity_repository.exists_hourly_activity(
                    self.user_id, *hours
                )
            )
        return self._hour_ranges[hours]

    async def is_met(self, achievement: Achievement) -> bool:
        """Compare the measure behind an achievement with its threshold."""
        kind = achievement.threshold_type
        threshold = achievement.threshold_value

        if kind is ThresholdType.TOTAL_HOURS:
            total = sum(day.total_seconds for day in await self.daily())
            return total >= threshold * SECONDS_PER_HOUR
        if kind is ThresholdType.STREAK_DAYS:
            active = {day.day for day in await self.daily() if day.total_seconds > 0}
            return streak_days(active, self.today) >= threshold
        if kind is ThresholdType.DISTINCT_LANGUAGE_COUNT:
            languages = set()
            for day in await self.daily():
                languages.update(day.languages)
            return len(languages) >= threshold
        if kind is ThresholdType.FRIEND_COUNT:
            return await self.friend_count() >= threshold
        if kind is ThresholdType.NIGHT_CODING_PRESENCE:
            return await self.coded_between(NIGHT_HOURS)
        if kind is ThresholdType.EARLY_CODING_PRESENCE:
            return await self.coded_between(EARLY_HOURS)
        if kind is ThresholdType.SINGLE_DAY_HOURS:
            return any(
                day.total_seconds >= threshold * SECONDS_PER_HOUR
                for day in await self.daily()
            )
        if kind is ThresholdType.WEEKEND_CODING_PRESENCE:
            weekdays = {
                day.day.weekday() for day in await self.daily() if day.total_seconds > 0
            }
            return SATURDAY in weekdays and SUNDAY in weekdays

        raise ValueError(f"Unknown threshold type: {kind}")


class AchievementService(Service):
    """Detects newly crossed achievement thresholds and records unlocks.

    Evaluation is idempotent: achievements already unlocked are skipped,
    and an unlock inserted concurrently by another evaluation is ignored.
    """

    def __init__(
        self,
        achievement_repository: AchievementRepository,
        activity_repository: ActivityRepository,
        friendship_repository: FriendshipRepository,
        clock: Clock,
        catalog: Sequence[Achievement] = ACHIEVEMENTS,
    ) -> None:
        """Initialize achievement service.

        Args:
            achievement_repository: Unlock records
            activity_repository: Aggregate store
            friendship_repository: Friendship graph
            clock: Wall-clock source
            catalog: Achievement definitions
        """
        self.achievement_repository = achievement_repository
        self.activity_repository = activity_repository
        self.friendship_repository = friendship_repository
        self.clock = clock
        self.catalog = tuple(catalog)

    async def evaluate_and_unlock(self, user_id: UserId) -> list[AchievementUnlock]:
        """Unlock every achievement whose threshold the user now meets.

        Args:
            user_id: The user to evaluate

        Returns:
            Unlocks created by this call, in catalog order; empty when
            nothing new was crossed
        """
        with logfire.span(
            "achievement_service.evaluate_and_unlock", user_id=str(user_id)
        ):
            # A failure undoes this evaluation only, never the caller's writes
            async with self.achievement_repository.savepoint():
                return await self._unlock_new(user_id)

    async def _unlock_new(self, user_id: UserId) -> list[AchievementUnlock]:
        unlocked = {
            unlock.achievement_id
            for unlock in await self.achievement_repository.find_unlocks(user_id)
        }
        candidates = [a for a in self.catalog if a.id not in unlocked]
        if not candidates:
            return []

        now = self.clock.now()
        measures = _Measures(
            user_id, now.date(), self.activity_repository, self.friendship_repository
        )

        new_unlocks = []
        for achievement in candidates:
            if not await measures.is_met(achievement):
                continue

            unlock = AchievementUnlock(
                user_id=user_id, achievement_id=achievement.id, unlocked_at=now
            )
            try:
                saved = await self.achievement_repository.save_unlock(unlock)
            except IntegrityError:
                logfire.warn(
                    "Achievement already unlocked concurrently",
                    user_id=str(user_id),
                    achievement_id=achievement.id,
                )
                continue

            logfire.info(
                "Achievement unlocked",
                user_id=str(user_id),
                achievement_id=achievement.id,
            )
            new_unlocks.append(saved)

        return new_unlocks

    async def list_achievements(self, user_id: UserId) -> list[AchievementStatus]:
        """The whole catalog with the user's unlock time per entry."""
        with logfire.span(
            "achievement_service.list_achievements", user_id=str(user_id)
        ):
            unlocks = {
                unlock.achievement_id: unlock.unlocked_at
                for unlock in await self.achievement_repository.find_unlocks(user_id)
            }
            return [
                AchievementStatus(
                    achievement=achievement, unlocked_at=unlocks.get(achievement.id)
                )
                for achievement in self.catalog
            ]
