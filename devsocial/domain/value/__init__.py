"""Domain value objects for DevSocial."""

from devsocial.domain.value.identifiers import (
    AchievementId,
    FriendRequestId,
    MessageId,
    UserId,
)
from devsocial.domain.value.types import (
    AvatarId,
    FriendRequestStatus,
    PresenceStatus,
    ThresholdType,
    Username,
    UserSettings,
)

__all__ = [
    # Identifiers
    "UserId",
    "FriendRequestId",
    "MessageId",
    "AchievementId",
    # Types
    "AvatarId",
    "FriendRequestStatus",
    "PresenceStatus",
    "ThresholdType",
    "Username",
    "UserSettings",
]
