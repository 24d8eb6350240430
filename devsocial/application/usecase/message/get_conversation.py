"""Conversation use cases: read history, mark read, unread count."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.message.send_message import MessageInfo
from devsocial.domain.service import MessageService
from devsocial.domain.value import UserId


class ConversationRequest(BaseModel):
    """Identifies a conversation between the user and a friend."""

    user_id: str
    friend_id: str
    limit: Optional[int] = None


class GetConversationResponse(BaseModel):
    """Latest messages, oldest first."""

    messages: list[MessageInfo]


class GetConversationUseCase:
    """Use case for reading a conversation."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: ConversationRequest) -> GetConversationResponse:
        messages = await self.message_service.get_conversation(
            UserId(UUID(request.user_id)),
            UserId(UUID(request.friend_id)),
            request.limit,
        )
        return GetConversationResponse(
            messages=[MessageInfo.from_message(m) for m in messages]
        )


class MarkConversationReadResponse(BaseModel):
    marked_read: int


class MarkConversationReadUseCase:
    """Use case for marking a friend's messages as read."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(
        self, request: ConversationRequest
    ) -> MarkConversationReadResponse:
        marked = await self.message_service.mark_conversation_read(
            UserId(UUID(request.user_id)), UserId(UUID(request.friend_id))
        )
        return MarkConversationReadResponse(marked_read=marked)


class GetUnreadCountRequest(BaseModel):
    user_id: str


class GetUnreadCountResponse(BaseModel):
    unread: int


class GetUnreadCountUseCase:
    """Use case for the unread message badge."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        unread = await self.message_service.get_unread_count(
            UserId(UUID(request.user_id))
        )
        return GetUnreadCountResponse(unread=unread)
