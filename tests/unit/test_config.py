"""Unit tests for settings loading and validation."""

import pytest
from pydantic import ValidationError

from devsocial.config import PresenceSettings, Settings


class TestPresenceSettings:
    def test_defaults(self):
        settings = PresenceSettings()

        assert settings.idle_threshold_seconds == 120
        assert settings.offline_threshold_seconds == 300

    @pytest.mark.parametrize("idle, offline", [(300, 300), (400, 300)])
    def test_idle_must_precede_offline(self, idle, offline):
        with pytest.raises(ValidationError):
            PresenceSettings(
                idle_threshold_seconds=idle, offline_threshold_seconds=offline
            )

    def test_thresholds_must_be_positive(self):
        with pytest.raises(ValidationError):
            PresenceSettings(idle_threshold_seconds=0)


class TestSettingsFromEnvironment:
    def test_nested_overrides(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("PRESENCE__IDLE_THRESHOLD_SECONDS", "90")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")
        monkeypatch.setenv("SOCIAL__SEARCH_LIMIT", "25")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.presence.idle_threshold_seconds == 90
        assert settings.presence.offline_threshold_seconds == 300
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"
        assert settings.social.search_limit == 25

    def test_invalid_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("PRESENCE__OFFLINE_THRESHOLD_SECONDS", "60")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
