"""Strongly typed identifiers for DevSocial entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
FriendRequestId = NewType("FriendRequestId", UUID)
MessageId = NewType("MessageId", UUID)

# Achievement ids are stable catalog slugs, not UUIDs
AchievementId = NewType("AchievementId", str)
