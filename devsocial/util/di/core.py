"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from devsocial.config import (
    PresenceSettings,
    RollupSettings,
    Settings,
    SocialSettings,
)
from devsocial.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_presence_settings(self, settings: Settings) -> PresenceSettings:
        return settings.presence

    @provide(scope=Scope.APP)
    def provide_rollup_settings(self, settings: Settings) -> RollupSettings:
        return settings.rollups

    @provide(scope=Scope.APP)
    def provide_social_settings(self, settings: Settings) -> SocialSettings:
        return settings.social
