"""Presence read models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devsocial.domain.model.common import DomainModel
from devsocial.domain.value import AvatarId, PresenceStatus, UserId, Username


class FriendActivity(DomainModel):
    """What a user sees about one friend in the presence feed.

    Friends who do not share activity are listed blanked: offline, zero
    seconds, no project or language.
    """

    user_id: UserId
    username: Username
    avatar_id: Optional[AvatarId] = None
    status: PresenceStatus = PresenceStatus.OFFLINE
    active_seconds: int = Field(default=0, ge=0)
    last_active: Optional[datetime] = None
    current_project: Optional[str] = None
    current_language: Optional[str] = None
