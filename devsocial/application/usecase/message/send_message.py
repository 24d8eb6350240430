"""Send message use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devsocial.domain.model import ChatMessage
from devsocial.domain.service import MessageService
from devsocial.domain.value import UserId


class SendMessageRequest(BaseModel):
    """Send message request."""

    user_id: str  # Sender, from authenticated user
    friend_id: str
    content: str


class MessageInfo(BaseModel):
    """A direct message."""

    message_id: str
    from_user_id: str
    to_user_id: str
    content: str
    created_at: datetime
    read_at: Optional[datetime]

    @classmethod
    def from_message(cls, message: ChatMessage) -> "MessageInfo":
        return cls(
            message_id=str(message.id),
            from_user_id=str(message.from_user_id),
            to_user_id=str(message.to_user_id),
            content=message.content,
            created_at=message.created_at,
            read_at=message.read_at,
        )


class SendMessageUseCase:
    """Use case for messaging a friend."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize send message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: SendMessageRequest) -> MessageInfo:
        """Execute send message flow.

        Raises:
            ValidationError: If the content is empty or too long
            InvalidOperationError: If messaging oneself
            NotFoundError: If the friend does not exist
            ForbiddenError: If the users are not friends
        """
        message = await self.message_service.send_message(
            UserId(UUID(request.user_id)),
            UserId(UUID(request.friend_id)),
            request.content,
        )
        return MessageInfo.from_message(message)
