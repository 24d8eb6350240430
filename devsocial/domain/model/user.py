"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devsocial.domain.model.common import DomainModel
from devsocial.domain.value import AvatarId, UserId, Username, UserSettings


class User(DomainModel):
    """A developer reporting coding activity.

    The credential hash is produced by the authentication layer and only
    stored here. The API key is the opaque credential the editor
    extension sends with every activity report.
    """

    id: UserId
    username: Username
    credential_hash: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    email: Optional[str] = None
    avatar_id: Optional[AvatarId] = None
    settings: UserSettings = UserSettings()
    created_at: datetime
