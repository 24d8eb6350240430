"""Domain services."""

from .achievement_catalog import ACHIEVEMENTS, get_achievement
from .achievement_service import AchievementService, AchievementStatus
from .activity_service import ActivityService
from .base import Service
from .friendship_service import FriendRequestView, FriendshipService
from .message_service import MessageService
from .presence import PresenceResolver
from .presence_feed_service import PresenceFeedService
from .user_service import UserService

__all__ = [
    "ACHIEVEMENTS",
    "AchievementService",
    "AchievementStatus",
    "ActivityService",
    "FriendRequestView",
    "FriendshipService",
    "MessageService",
    "PresenceFeedService",
    "PresenceResolver",
    "Service",
    "UserService",
    "get_achievement",
]
