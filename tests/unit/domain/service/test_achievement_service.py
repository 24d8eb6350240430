"""Unit tests for AchievementService."""

from datetime import date, timedelta

import pytest

from devsocial.domain.error import StorageError
from devsocial.domain.repository import AchievementRepository
from devsocial.domain.service import ACHIEVEMENTS, AchievementService, ActivityService
from devsocial.domain.service.achievement_service import streak_days
from devsocial.persistence.repository.inmemory import InMemoryFriendshipRepository
from tests.conftest import befriend, make_user
from tests.di import FROZEN_AT, FrozenClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _code_at(env, user, at, seconds, **breakdowns):
    """Merge activity as if reported at `at`, then restore the clock."""
    clock = await env.get(FrozenClock)
    activity_service = await env.get(ActivityService)
    clock.set(at)
    await activity_service.merge_activity(user.id, seconds, **breakdowns)
    clock.set(FROZEN_AT)


def _ids(unlocks):
    return [u.achievement_id for u in unlocks]


class UnreachableFriendshipRepository(InMemoryFriendshipRepository):
    async def count_friends(self, user_id):
        raise StorageError("friendships unavailable")


class TestStreakDays:
    def test_counts_consecutive_days_ending_today(self):
        today = date(2025, 3, 12)
        active = {today, today - timedelta(days=1), today - timedelta(days=2)}

        assert streak_days(active, today) == 3

    def test_gap_breaks_streak(self):
        today = date(2025, 3, 12)
        active = {today, today - timedelta(days=2), today - timedelta(days=3)}

        assert streak_days(active, today) == 1

    def test_no_activity_today(self):
        today = date(2025, 3, 12)

        assert streak_days({today - timedelta(days=1)}, today) == 0


class TestEvaluateAndUnlock:
    """Tests for evaluate_and_unlock."""

    @pytest.mark.asyncio
    async def test_first_hour_unlocks_once(self, unit_env):
        """Evaluation is idempotent: a second call unlocks nothing."""
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        await _code_at(unit_env, alice, FROZEN_AT, 3600)

        # Act
        first = await service.evaluate_and_unlock(alice.id)
        second = await service.evaluate_and_unlock(alice.id)

        # Assert
        assert _ids(first) == ["first_hour"]
        assert first[0].unlocked_at == FROZEN_AT
        assert second == []

    @pytest.mark.asyncio
    async def test_below_threshold_unlocks_nothing(self, unit_env):
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        await _code_at(unit_env, alice, FROZEN_AT, 3599)

        assert await service.evaluate_and_unlock(alice.id) == []

    @pytest.mark.asyncio
    async def test_three_day_streak(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        for days_ago in (2, 1, 0):
            await _code_at(unit_env, alice, FROZEN_AT - timedelta(days=days_ago), 60)

        # Act
        unlocked = _ids(await service.evaluate_and_unlock(alice.id))

        # Assert
        assert "streak_3" in unlocked
        assert "streak_7" not in unlocked

    @pytest.mark.asyncio
    async def test_distinct_languages(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        await _code_at(
            unit_env,
            alice,
            FROZEN_AT - timedelta(days=3),
            60,
            languages={"go": 30, "rust": 30},
        )
        await _code_at(unit_env, alice, FROZEN_AT, 60, languages={"go": 30, "zig": 30})

        # Act
        unlocked = _ids(await service.evaluate_and_unlock(alice.id))

        # Assert
        assert "polyglot_3" in unlocked
        assert "polyglot_5" not in unlocked

    @pytest.mark.asyncio
    async def test_night_and_early_hours(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await _code_at(unit_env, alice, FROZEN_AT.replace(hour=2), 60)
        await _code_at(unit_env, bob, FROZEN_AT.replace(hour=6), 60)

        # Act
        alice_unlocked = _ids(await service.evaluate_and_unlock(alice.id))
        bob_unlocked = _ids(await service.evaluate_and_unlock(bob.id))

        # Assert
        assert "night_owl" in alice_unlocked
        assert "early_bird" not in alice_unlocked
        assert "early_bird" in bob_unlocked
        assert "night_owl" not in bob_unlocked

    @pytest.mark.asyncio
    async def test_weekend_needs_both_days(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        saturday = FROZEN_AT - timedelta(days=4)
        sunday = FROZEN_AT - timedelta(days=3)
        await _code_at(unit_env, alice, saturday, 60)

        # Act
        saturday_only = _ids(await service.evaluate_and_unlock(alice.id))
        await _code_at(unit_env, alice, sunday, 60)
        both_days = _ids(await service.evaluate_and_unlock(alice.id))

        # Assert
        assert saturday.weekday() == 5
        assert "weekend_warrior" not in saturday_only
        assert "weekend_warrior" in both_days

    @pytest.mark.asyncio
    async def test_marathon_needs_single_long_day(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await _code_at(unit_env, alice, FROZEN_AT - timedelta(days=1), 5 * 3600)
        await _code_at(unit_env, alice, FROZEN_AT, 5 * 3600)
        await _code_at(unit_env, bob, FROZEN_AT, 8 * 3600)

        # Act / Assert
        assert "marathon" not in _ids(await service.evaluate_and_unlock(alice.id))
        assert "marathon" in _ids(await service.evaluate_and_unlock(bob.id))

    @pytest.mark.asyncio
    async def test_first_friend(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await befriend(unit_env, alice, bob)

        # Act
        unlocked = _ids(await service.evaluate_and_unlock(alice.id))

        # Assert
        assert unlocked == ["first_friend"]

    @pytest.mark.asyncio
    async def test_unlocks_are_stored(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        repo = await unit_env.get(AchievementRepository)
        alice = await make_user(unit_env, "alice")
        await _code_at(unit_env, alice, FROZEN_AT, 3600)

        # Act
        await service.evaluate_and_unlock(alice.id)

        # Assert
        stored = await repo.find_unlocks(alice.id)
        assert _ids(stored) == ["first_hour"]

    @pytest.mark.asyncio
    async def test_failed_evaluation_keeps_no_unlocks(self, unit_env):
        """Unlocks saved before a failing read are undone with the evaluation."""
        # Arrange
        healthy = await unit_env.get(AchievementService)
        repo = await unit_env.get(AchievementRepository)
        service = AchievementService(
            repo,
            healthy.activity_repository,
            UnreachableFriendshipRepository(),
            healthy.clock,
        )
        alice = await make_user(unit_env, "alice")
        await _code_at(unit_env, alice, FROZEN_AT, 3600)

        # Act
        with pytest.raises(StorageError):
            await service.evaluate_and_unlock(alice.id)

        # Assert
        assert await repo.find_unlocks(alice.id) == []
        assert _ids(await healthy.evaluate_and_unlock(alice.id)) == ["first_hour"]


class TestListAchievements:
    @pytest.mark.asyncio
    async def test_full_catalog_with_unlock_state(self, unit_env):
        # Arrange
        service = await unit_env.get(AchievementService)
        alice = await make_user(unit_env, "alice")
        await _code_at(unit_env, alice, FROZEN_AT, 3600)
        await service.evaluate_and_unlock(alice.id)

        # Act
        statuses = await service.list_achievements(alice.id)

        # Assert
        assert [s.achievement.id for s in statuses] == [a.id for a in ACHIEVEMENTS]
        unlocked = [s.achievement.id for s in statuses if s.unlocked]
        assert unlocked == ["first_hour"]
