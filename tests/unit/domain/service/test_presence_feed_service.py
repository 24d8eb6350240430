"""Unit tests for PresenceFeedService."""

from uuid import uuid4

import pytest

from devsocial.domain.service import ActivityService, PresenceFeedService
from devsocial.domain.service.presence_feed_service import top_entry
from devsocial.domain.value import PresenceStatus, UserId
from tests.conftest import befriend, make_user
from tests.di import FROZEN_AT, FrozenClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTopEntry:
    def test_largest_value_wins(self):
        assert top_entry({"go": 10, "rust": 30, "zig": 20}) == "rust"

    def test_first_key_wins_ties(self):
        assert top_entry({"go": 30, "rust": 30}) == "go"

    def test_empty_or_zero_breakdown(self):
        assert top_entry({}) is None
        assert top_entry({"go": 0}) is None


class TestGetFriendsActivity:
    """Tests for get_friends_activity."""

    @pytest.mark.asyncio
    async def test_no_friends_gives_empty_feed(self, unit_env):
        # Arrange
        feed_service = await unit_env.get(PresenceFeedService)
        alice = await make_user(unit_env, "alice")

        # Act / Assert
        assert await feed_service.get_friends_activity(alice.id) == []
        assert await feed_service.get_friends_activity(UserId(uuid4())) == []

    @pytest.mark.asyncio
    async def test_online_friend_shows_top_project_and_language(self, unit_env):
        # Arrange
        feed_service = await unit_env.get(PresenceFeedService)
        activity_service = await unit_env.get(ActivityService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await befriend(unit_env, alice, bob)
        await activity_service.merge_activity(
            bob.id, 900, projects={"app": 600, "lib": 300}, languages={"go": 900}
        )

        # Act
        feed = await feed_service.get_friends_activity(alice.id)

        # Assert
        assert len(feed) == 1
        entry = feed[0]
        assert entry.user_id == bob.id
        assert entry.status is PresenceStatus.ONLINE
        assert entry.active_seconds == 900
        assert entry.last_active == FROZEN_AT
        assert entry.current_project == "app"
        assert entry.current_language == "go"

    @pytest.mark.asyncio
    async def test_presence_follows_last_update_age(self, unit_env):
        # Arrange
        feed_service = await unit_env.get(PresenceFeedService)
        activity_service = await unit_env.get(ActivityService)
        clock = await unit_env.get(FrozenClock)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await befriend(unit_env, alice, bob)
        await activity_service.merge_activity(bob.id, 60, projects={"app": 60})

        # Act
        clock.advance(seconds=150)
        idle = (await feed_service.get_friends_activity(alice.id))[0]
        clock.advance(seconds=150)
        offline = (await feed_service.get_friends_activity(alice.id))[0]

        # Assert
        assert idle.status is PresenceStatus.IDLE
        assert idle.current_project == "app"
        assert offline.status is PresenceStatus.OFFLINE
        assert offline.active_seconds == 60
        assert offline.current_project is None

    @pytest.mark.asyncio
    async def test_friend_not_sharing_activity_is_blanked(self, unit_env):
        """A friend with share_activity off is listed offline with nothing else."""
        # Arrange
        feed_service = await unit_env.get(PresenceFeedService)
        activity_service = await unit_env.get(ActivityService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob", share_activity=False)
        await befriend(unit_env, alice, bob)
        await activity_service.merge_activity(
            bob.id, 900, projects={"secret": 900}, languages={"go": 900}
        )

        # Act
        feed = await feed_service.get_friends_activity(alice.id)

        # Assert
        entry = feed[0]
        assert entry.username == bob.username
        assert entry.status is PresenceStatus.OFFLINE
        assert entry.active_seconds == 0
        assert entry.last_active is None
        assert entry.current_project is None
        assert entry.current_language is None

    @pytest.mark.asyncio
    async def test_project_and_language_sharing_flags(self, unit_env):
        # Arrange
        feed_service = await unit_env.get(PresenceFeedService)
        activity_service = await unit_env.get(ActivityService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(
            unit_env, "bob", share_project_name=False, share_language=True
        )
        await befriend(unit_env, alice, bob)
        await activity_service.merge_activity(
            bob.id, 60, projects={"secret": 60}, languages={"rust": 60}
        )

        # Act
        entry = (await feed_service.get_friends_activity(alice.id))[0]

        # Assert
        assert entry.status is PresenceStatus.ONLINE
        assert entry.current_project is None
        assert entry.current_language == "rust"

    @pytest.mark.asyncio
    async def test_feed_sorted_by_status_then_seconds(self, unit_env):
        # Arrange
        feed_service = await unit_env.get(PresenceFeedService)
        activity_service = await unit_env.get(ActivityService)
        clock = await unit_env.get(FrozenClock)
        alice = await make_user(unit_env, "alice")
        idle_bob = await make_user(unit_env, "bob")
        busy_carol = await make_user(unit_env, "carol")
        quiet_dave = await make_user(unit_env, "dave")
        absent_erin = await make_user(unit_env, "erin")
        for friend in (idle_bob, busy_carol, quiet_dave, absent_erin):
            await befriend(unit_env, alice, friend)

        await activity_service.merge_activity(idle_bob.id, 5000)
        clock.advance(seconds=200)
        await activity_service.merge_activity(busy_carol.id, 3000)
        await activity_service.merge_activity(quiet_dave.id, 100)

        # Act
        feed = await feed_service.get_friends_activity(alice.id)

        # Assert
        assert [e.user_id for e in feed] == [
            busy_carol.id,
            quiet_dave.id,
            idle_bob.id,
            absent_erin.id,
        ]
        assert [e.status for e in feed] == [
            PresenceStatus.ONLINE,
            PresenceStatus.ONLINE,
            PresenceStatus.IDLE,
            PresenceStatus.OFFLINE,
        ]
