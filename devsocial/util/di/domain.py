"""Domain layer DI providers."""

from dishka import Scope, provide

from devsocial.config import PresenceSettings, RollupSettings, SocialSettings
from devsocial.domain.repository import (
    AchievementRepository,
    ActivityRepository,
    FriendshipRepository,
    MessageRepository,
    UserRepository,
)
from devsocial.domain.service import (
    AchievementService,
    ActivityService,
    FriendshipService,
    MessageService,
    PresenceFeedService,
    PresenceResolver,
    UserService,
)
from devsocial.util.clock import Clock
from devsocial.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_presence_resolver(self, settings: PresenceSettings) -> PresenceResolver:
        """Provide the presence classifier (stateless)."""
        return PresenceResolver(settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, clock: Clock
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, clock=clock)

    @provide
    def get_activity_service(
        self,
        activity_repository: ActivityRepository,
        clock: Clock,
        rollup_settings: RollupSettings,
    ) -> ActivityService:
        """Provide activity domain service."""
        return ActivityService(
            activity_repository=activity_repository,
            clock=clock,
            rollup_settings=rollup_settings,
        )

    @provide
    def get_presence_feed_service(
        self,
        friendship_repository: FriendshipRepository,
        activity_repository: ActivityRepository,
        user_service: UserService,
        presence_resolver: PresenceResolver,
        clock: Clock,
    ) -> PresenceFeedService:
        """Provide presence feed domain service."""
        return PresenceFeedService(
            friendship_repository=friendship_repository,
            activity_repository=activity_repository,
            user_service=user_service,
            presence_resolver=presence_resolver,
            clock=clock,
        )

    @provide
    def get_friendship_service(
        self,
        friendship_repository: FriendshipRepository,
        user_repository: UserRepository,
        user_service: UserService,
        clock: Clock,
        social_settings: SocialSettings,
    ) -> FriendshipService:
        """Provide friendship domain service."""
        return FriendshipService(
            friendship_repository=friendship_repository,
            user_repository=user_repository,
            user_service=user_service,
            clock=clock,
            social_settings=social_settings,
        )

    @provide
    def get_achievement_service(
        self,
        achievement_repository: AchievementRepository,
        activity_repository: ActivityRepository,
        friendship_repository: FriendshipRepository,
        clock: Clock,
    ) -> AchievementService:
        """Provide achievement domain service."""
        return AchievementService(
            achievement_repository=achievement_repository,
            activity_repository=activity_repository,
            friendship_repository=friendship_repository,
            clock=clock,
        )

    @provide
    def get_message_service(
        self,
        message_repository: MessageRepository,
        friendship_repository: FriendshipRepository,
        user_service: UserService,
        clock: Clock,
        social_settings: SocialSettings,
    ) -> MessageService:
        """Provide message domain service."""
        return MessageService(
            message_repository=message_repository,
            friendship_repository=friendship_repository,
            user_service=user_service,
            clock=clock,
            social_settings=social_settings,
        )
