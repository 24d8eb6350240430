"""Domain value objects for DevSocial.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from devsocial.domain.value.common import RootValueObject, ValueObject


class PresenceStatus(str, Enum):
    """Presence of a user derived from the recency of their last merge."""

    ONLINE = "online"
    IDLE = "idle"
    OFFLINE = "offline"

    @property
    def rank(self) -> int:
        """Display order: online first, offline last."""
        return _PRESENCE_RANK[self]


_PRESENCE_RANK = {
    PresenceStatus.ONLINE: 0,
    PresenceStatus.IDLE: 1,
    PresenceStatus.OFFLINE: 2,
}


class FriendRequestStatus(str, Enum):
    """Friend request lifecycle: pending -> accepted | rejected."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not FriendRequestStatus.PENDING


class ThresholdType(str, Enum):
    """Measure an achievement threshold is compared against."""

    TOTAL_HOURS = "total-hours"
    STREAK_DAYS = "streak-days"
    DISTINCT_LANGUAGE_COUNT = "distinct-language-count"
    FRIEND_COUNT = "friend-count"
    NIGHT_CODING_PRESENCE = "night-coding-presence"
    EARLY_CODING_PRESENCE = "early-coding-presence"
    SINGLE_DAY_HOURS = "single-day-hours"
    WEEKEND_CODING_PRESENCE = "weekend-coding-presence"


class Username(RootValueObject[str]):
    """Public username.

    3-50 characters: letters, digits and underscores. Uniqueness is
    case-insensitive, use `.key` when comparing.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits or underscores"
            )
        return v

    @property
    def key(self) -> str:
        """Case-folded form used for lookups and uniqueness."""
        return self.root.lower()


class AvatarId(RootValueObject[str]):
    """Identifier of a preset avatar picked by the user."""

    @field_validator("root")
    @classmethod
    def validate_avatar_id(cls, v: str) -> str:
        """Validate avatar id is a short slug."""
        if not re.match(r"^[a-z0-9_-]{1,64}$", v):
            raise ValueError("Avatar id must be 1-64 chars of [a-z0-9_-]")
        return v


class UserSettings(ValueObject):
    """Sharing preferences of a user."""

    share_activity: bool = True
    share_project_name: bool = True
    share_language: bool = True
    auto_post: bool = False
    post_threshold: int = Field(default=2, ge=1, le=24)  # Hours before auto post
