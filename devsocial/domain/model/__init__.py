"""Domain model entities for DevSocial."""

from devsocial.domain.model.achievement import Achievement, AchievementUnlock
from devsocial.domain.model.activity import (
    ActivityDelta,
    DailyActivity,
    DailyTotal,
    HourlyActivity,
    HourlyBucket,
    LanguageShare,
)
from devsocial.domain.model.friendship import FriendRequest, Friendship
from devsocial.domain.model.message import ChatMessage
from devsocial.domain.model.presence import FriendActivity
from devsocial.domain.model.user import User

__all__ = [
    "Achievement",
    "AchievementUnlock",
    "ActivityDelta",
    "ChatMessage",
    "DailyActivity",
    "DailyTotal",
    "FriendActivity",
    "FriendRequest",
    "Friendship",
    "HourlyActivity",
    "HourlyBucket",
    "LanguageShare",
    "User",
]
