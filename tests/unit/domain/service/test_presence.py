"""Unit tests for PresenceResolver."""

from datetime import datetime, timedelta, timezone

import pytest

from devsocial.config import PresenceSettings
from devsocial.domain.service import PresenceResolver
from devsocial.domain.value import PresenceStatus

NOW = datetime(2025, 3, 12, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def resolver():
    return PresenceResolver(PresenceSettings())


class TestClassify:
    """Tests for classify with the default 120s / 300s thresholds."""

    @pytest.mark.parametrize(
        "age_seconds, expected",
        [
            (0, PresenceStatus.ONLINE),
            (119, PresenceStatus.ONLINE),
            (120, PresenceStatus.IDLE),
            (121, PresenceStatus.IDLE),
            (299, PresenceStatus.IDLE),
            (300, PresenceStatus.OFFLINE),
            (301, PresenceStatus.OFFLINE),
            (86_400, PresenceStatus.OFFLINE),
        ],
    )
    def test_threshold_boundaries(self, resolver, age_seconds, expected):
        """Thresholds are exclusive upper bounds of each status."""
        # Act
        status = resolver.classify(NOW - timedelta(seconds=age_seconds), NOW)

        # Assert
        assert status is expected

    def test_no_activity_today_is_offline(self, resolver):
        """A user without an aggregate today is offline."""
        assert resolver.classify(None, NOW) is PresenceStatus.OFFLINE

    def test_custom_thresholds(self):
        """Deployments can tune both thresholds."""
        # Arrange
        resolver = PresenceResolver(
            PresenceSettings(idle_threshold_seconds=60, offline_threshold_seconds=90)
        )

        # Act / Assert
        assert resolver.classify(NOW - timedelta(seconds=59), NOW) is PresenceStatus.ONLINE
        assert resolver.classify(NOW - timedelta(seconds=60), NOW) is PresenceStatus.IDLE
        assert resolver.classify(NOW - timedelta(seconds=90), NOW) is PresenceStatus.OFFLINE


class TestStatusRank:
    def test_online_sorts_before_idle_before_offline(self):
        ranks = [s.rank for s in (PresenceStatus.ONLINE, PresenceStatus.IDLE, PresenceStatus.OFFLINE)]
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == 3
