"""Response models shared by several use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from devsocial.domain.model import Achievement, AchievementUnlock, FriendActivity, User
from devsocial.domain.value import PresenceStatus


class UserInfo(BaseModel):
    """Public view of a user."""

    user_id: str
    username: str
    avatar_id: Optional[str]

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            avatar_id=user.avatar_id.root if user.avatar_id else None,
        )


class FriendActivityInfo(BaseModel):
    """One entry of the friends presence feed."""

    user_id: str
    username: str
    avatar_id: Optional[str]
    status: PresenceStatus
    active_seconds: int
    last_active: Optional[datetime]
    current_project: Optional[str]
    current_language: Optional[str]

    @classmethod
    def from_activity(cls, activity: FriendActivity) -> "FriendActivityInfo":
        return cls(
            user_id=str(activity.user_id),
            username=activity.username.root,
            avatar_id=activity.avatar_id.root if activity.avatar_id else None,
            status=activity.status,
            active_seconds=activity.active_seconds,
            last_active=activity.last_active,
            current_project=activity.current_project,
            current_language=activity.current_language,
        )


class AchievementInfo(BaseModel):
    """Catalog entry, with the unlock time when unlocked."""

    id: str
    name: str
    description: str
    icon: str
    threshold_type: str
    threshold_value: int
    unlocked: bool
    unlocked_at: Optional[datetime]

    @classmethod
    def from_achievement(
        cls, achievement: Achievement, unlocked_at: Optional[datetime]
    ) -> "AchievementInfo":
        return cls(
            id=achievement.id,
            name=achievement.name,
            description=achievement.description,
            icon=achievement.icon,
            threshold_type=achievement.threshold_type.value,
            threshold_value=achievement.threshold_value,
            unlocked=unlocked_at is not None,
            unlocked_at=unlocked_at,
        )

    @classmethod
    def from_unlock(
        cls, achievement: Achievement, unlock: AchievementUnlock
    ) -> "AchievementInfo":
        return cls.from_achievement(achievement, unlock.unlocked_at)
