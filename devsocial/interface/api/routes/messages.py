"""Direct message routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from devsocial.application.usecase.message import (
    ConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    MarkConversationReadResponse,
    MarkConversationReadUseCase,
    MessageInfo,
    SendMessageRequest,
    SendMessageUseCase,
)
from devsocial.application.usecase.user import AuthenticateUseCase
from devsocial.interface.api.auth import authenticate

router = APIRouter(prefix="/messages", tags=["messages"], route_class=DishkaRoute)


class SendMessageAPIRequest(BaseModel):
    content: str


# Declared before /{friend_id} so "unread" is not parsed as an ID
@router.get("/unread", response_model=GetUnreadCountResponse)
async def get_unread_count(
    unread_use_case: FromDishka[GetUnreadCountUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> GetUnreadCountResponse:
    """Number of unread messages addressed to the caller."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await unread_use_case.execute(GetUnreadCountRequest(user_id=user.user_id))


@router.get("/{friend_id}", response_model=GetConversationResponse)
async def get_conversation(
    friend_id: UUID,
    conversation_use_case: FromDishka[GetConversationUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    limit: int | None = Query(default=None),
    x_api_key: str | None = Header(default=None),
) -> GetConversationResponse:
    """Latest messages with a friend, oldest first."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await conversation_use_case.execute(
        ConversationRequest(
            user_id=user.user_id, friend_id=str(friend_id), limit=limit
        )
    )


@router.post(
    "/{friend_id}", response_model=MessageInfo, status_code=status.HTTP_201_CREATED
)
async def send_message(
    friend_id: UUID,
    request: SendMessageAPIRequest,
    send_message_use_case: FromDishka[SendMessageUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> MessageInfo:
    """Send a message to a friend.

    403 if the recipient is not a friend.
    """
    user = await authenticate(x_api_key, authenticate_use_case)
    return await send_message_use_case.execute(
        SendMessageRequest(
            user_id=user.user_id, friend_id=str(friend_id), content=request.content
        )
    )


@router.post("/{friend_id}/read", response_model=MarkConversationReadResponse)
async def mark_conversation_read(
    friend_id: UUID,
    mark_read_use_case: FromDishka[MarkConversationReadUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> MarkConversationReadResponse:
    """Mark every message from the friend as read."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await mark_read_use_case.execute(
        ConversationRequest(user_id=user.user_id, friend_id=str(friend_id))
    )
