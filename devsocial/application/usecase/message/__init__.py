"""Messaging use cases."""

from .get_conversation import (
    ConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    MarkConversationReadResponse,
    MarkConversationReadUseCase,
)
from .send_message import MessageInfo, SendMessageRequest, SendMessageUseCase

__all__ = [
    "ConversationRequest",
    "GetConversationResponse",
    "GetConversationUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountResponse",
    "GetUnreadCountUseCase",
    "MarkConversationReadResponse",
    "MarkConversationReadUseCase",
    "MessageInfo",
    "SendMessageRequest",
    "SendMessageUseCase",
]
