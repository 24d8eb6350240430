"""Application layer DI providers."""

from dishka import Scope, provide

from devsocial.application.usecase.achievement import (
    EvaluateAchievementsUseCase,
    ListAchievementsUseCase,
)
from devsocial.application.usecase.activity import (
    GetActivityStatsUseCase,
    GetDailyHistoryUseCase,
    GetFriendsActivityUseCase,
    GetHourlyActivityUseCase,
    GetLanguageDistributionUseCase,
    SyncActivityUseCase,
)
from devsocial.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    GetFriendRequestsUseCase,
    GetFriendsUseCase,
    RejectFriendRequestUseCase,
    RemoveFriendUseCase,
    SearchUsersUseCase,
    SendFriendRequestUseCase,
)
from devsocial.application.usecase.message import (
    GetConversationUseCase,
    GetUnreadCountUseCase,
    MarkConversationReadUseCase,
    SendMessageUseCase,
)
from devsocial.application.usecase.user import (
    AuthenticateUseCase,
    CreateUserUseCase,
    UpdateAvatarUseCase,
    UpdateSettingsUseCase,
)
from devsocial.domain.service import (
    AchievementService,
    ActivityService,
    FriendshipService,
    MessageService,
    PresenceFeedService,
    UserService,
)
from devsocial.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Activity use cases
    @provide
    def get_sync_activity_use_case(
        self,
        activity_service: ActivityService,
        presence_feed_service: PresenceFeedService,
        achievement_service: AchievementService,
    ) -> SyncActivityUseCase:
        """Provide sync activity use case."""
        return SyncActivityUseCase(
            activity_service=activity_service,
            presence_feed_service=presence_feed_service,
            achievement_service=achievement_service,
        )

    @provide
    def get_activity_stats_use_case(
        self, activity_service: ActivityService
    ) -> GetActivityStatsUseCase:
        return GetActivityStatsUseCase(activity_service)

    @provide
    def get_friends_activity_use_case(
        self, presence_feed_service: PresenceFeedService
    ) -> GetFriendsActivityUseCase:
        return GetFriendsActivityUseCase(presence_feed_service)

    @provide
    def get_hourly_activity_use_case(
        self, activity_service: ActivityService
    ) -> GetHourlyActivityUseCase:
        return GetHourlyActivityUseCase(activity_service)

    @provide
    def get_daily_history_use_case(
        self, activity_service: ActivityService
    ) -> GetDailyHistoryUseCase:
        return GetDailyHistoryUseCase(activity_service)

    @provide
    def get_language_distribution_use_case(
        self, activity_service: ActivityService
    ) -> GetLanguageDistributionUseCase:
        return GetLanguageDistributionUseCase(activity_service)

    # Friend use cases
    @provide
    def get_send_friend_request_use_case(
        self, friendship_service: FriendshipService
    ) -> SendFriendRequestUseCase:
        return SendFriendRequestUseCase(friendship_service)

    @provide
    def get_accept_friend_request_use_case(
        self, friendship_service: FriendshipService
    ) -> AcceptFriendRequestUseCase:
        return AcceptFriendRequestUseCase(friendship_service)

    @provide
    def get_reject_friend_request_use_case(
        self, friendship_service: FriendshipService
    ) -> RejectFriendRequestUseCase:
        return RejectFriendRequestUseCase(friendship_service)

    @provide
    def get_remove_friend_use_case(
        self, friendship_service: FriendshipService
    ) -> RemoveFriendUseCase:
        return RemoveFriendUseCase(friendship_service)

    @provide
    def get_friends_use_case(
        self, friendship_service: FriendshipService
    ) -> GetFriendsUseCase:
        return GetFriendsUseCase(friendship_service)

    @provide
    def get_friend_requests_use_case(
        self, friendship_service: FriendshipService
    ) -> GetFriendRequestsUseCase:
        return GetFriendRequestsUseCase(friendship_service)

    @provide
    def get_search_users_use_case(
        self, friendship_service: FriendshipService
    ) -> SearchUsersUseCase:
        return SearchUsersUseCase(friendship_service)

    # Achievement use cases
    @provide
    def get_list_achievements_use_case(
        self, achievement_service: AchievementService
    ) -> ListAchievementsUseCase:
        return ListAchievementsUseCase(achievement_service)

    @provide
    def get_evaluate_achievements_use_case(
        self, achievement_service: AchievementService
    ) -> EvaluateAchievementsUseCase:
        return EvaluateAchievementsUseCase(achievement_service)

    # Message use cases
    @provide
    def get_send_message_use_case(
        self, message_service: MessageService
    ) -> SendMessageUseCase:
        return SendMessageUseCase(message_service)

    @provide
    def get_conversation_use_case(
        self, message_service: MessageService
    ) -> GetConversationUseCase:
        return GetConversationUseCase(message_service)

    @provide
    def get_mark_conversation_read_use_case(
        self, message_service: MessageService
    ) -> MarkConversationReadUseCase:
        return MarkConversationReadUseCase(message_service)

    @provide
    def get_unread_count_use_case(
        self, message_service: MessageService
    ) -> GetUnreadCountUseCase:
        return GetUnreadCountUseCase(message_service)

    # User use cases
    @provide
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        return CreateUserUseCase(user_service)

    @provide
    def get_authenticate_use_case(
        self, user_service: UserService
    ) -> AuthenticateUseCase:
        return AuthenticateUseCase(user_service)

    @provide
    def get_update_settings_use_case(
        self, user_service: UserService
    ) -> UpdateSettingsUseCase:
        return UpdateSettingsUseCase(user_service)

    @provide
    def get_update_avatar_use_case(
        self, user_service: UserService
    ) -> UpdateAvatarUseCase:
        return UpdateAvatarUseCase(user_service)
