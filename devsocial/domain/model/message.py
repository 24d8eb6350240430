"""Direct messages between friends."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devsocial.domain.model.common import DomainModel
from devsocial.domain.value import MessageId, UserId


class ChatMessage(DomainModel):
    """A direct message.

    Only sent between users sharing a friendship edge. `read_at` goes from
    unset to set once and never reverts.
    """

    id: MessageId
    from_user_id: UserId
    to_user_id: UserId
    content: str = Field(min_length=1)
    created_at: datetime
    read_at: Optional[datetime] = None
