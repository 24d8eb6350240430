"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from devsocial.domain.model import (
    AchievementUnlock,
    ChatMessage,
    DailyActivity,
    FriendRequest,
    HourlyActivity,
    User,
)
from devsocial.domain.value import (
    AchievementId,
    AvatarId,
    FriendRequestId,
    FriendRequestStatus,
    MessageId,
    UserId,
    Username,
    UserSettings,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _breakdown(value: Optional[Dict[str, Any]]) -> Dict[str, int]:
    # JSONB sums come back as int or Decimal depending on the path
    return {key: int(seconds) for key, seconds in (value or {}).items()}


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        credential_hash=row["credential_hash"],
        api_key=row["api_key"],
        email=row.get("email"),
        avatar_id=AvatarId(row["avatar_id"]) if row.get("avatar_id") else None,
        settings=UserSettings(
            share_activity=row["share_activity"],
            share_project_name=row["share_project_name"],
            share_language=row["share_language"],
            auto_post=row["auto_post"],
            post_threshold=row["post_threshold"],
        ),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "credential_hash": user.credential_hash,
        "api_key": user.api_key,
        "email": user.email,
        "avatar_id": user.avatar_id.root if user.avatar_id else None,
        "share_activity": user.settings.share_activity,
        "share_project_name": user.settings.share_project_name,
        "share_language": user.settings.share_language,
        "auto_post": user.settings.auto_post,
        "post_threshold": user.settings.post_threshold,
        "created_at": user.created_at,
    }


def row_to_daily_activity(row: Dict[str, Any]) -> DailyActivity:
    """Convert database row to DailyActivity domain model."""
    return DailyActivity(
        user_id=UserId(_uuid(row["user_id"])),
        day=row["date"],
        total_seconds=int(row["total_seconds"]),
        projects=_breakdown(row.get("projects")),
        languages=_breakdown(row.get("languages")),
        last_update=row["last_update"],
    )


def row_to_hourly_activity(row: Dict[str, Any]) -> HourlyActivity:
    """Convert database row to HourlyActivity domain model."""
    return HourlyActivity(
        user_id=UserId(_uuid(row["user_id"])),
        day=row["date"],
        hour=row["hour"],
        total_seconds=int(row["total_seconds"]),
        projects=_breakdown(row.get("projects")),
        languages=_breakdown(row.get("languages")),
        last_update=row["last_update"],
    )


def row_to_friend_request(row: Dict[str, Any]) -> FriendRequest:
    """Convert database row to FriendRequest domain model."""
    return FriendRequest(
        id=FriendRequestId(_uuid(row["id"])),
        from_user_id=UserId(_uuid(row["from_user_id"])),
        to_user_id=UserId(_uuid(row["to_user_id"])),
        status=FriendRequestStatus(row["status"]),
        created_at=row["created_at"],
        responded_at=row.get("responded_at"),
    )


def friend_request_to_dict(request: FriendRequest) -> Dict[str, Any]:
    """Convert FriendRequest domain model to database dict."""
    data = request.model_dump()
    data["status"] = request.status.value
    return data


def row_to_achievement_unlock(row: Dict[str, Any]) -> AchievementUnlock:
    """Convert database row to AchievementUnlock domain model."""
    return AchievementUnlock(
        user_id=UserId(_uuid(row["user_id"])),
        achievement_id=AchievementId(row["achievement_id"]),
        unlocked_at=row["unlocked_at"],
    )


def row_to_chat_message(row: Dict[str, Any]) -> ChatMessage:
    """Convert database row to ChatMessage domain model."""
    return ChatMessage(
        id=MessageId(_uuid(row["id"])),
        from_user_id=UserId(_uuid(row["from_user_id"])),
        to_user_id=UserId(_uuid(row["to_user_id"])),
        content=row["content"],
        created_at=row["created_at"],
        read_at=row.get("read_at"),
    )
