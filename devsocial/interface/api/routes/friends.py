"""Friendship routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from devsocial.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    FriendRequestResponse,
    GetFriendRequestsRequest,
    GetFriendRequestsResponse,
    GetFriendRequestsUseCase,
    GetFriendsRequest,
    GetFriendsResponse,
    GetFriendsUseCase,
    RejectFriendRequestUseCase,
    RemoveFriendRequest,
    RemoveFriendResponse,
    RemoveFriendUseCase,
    RespondFriendRequestRequest,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)
from devsocial.application.usecase.user import AuthenticateUseCase
from devsocial.interface.api.auth import authenticate

router = APIRouter(prefix="/friends", tags=["friends"], route_class=DishkaRoute)


class SendFriendRequestAPIRequest(BaseModel):
    """Recipient, by user ID or username."""

    target: str = Field(min_length=1)


@router.get("", response_model=GetFriendsResponse)
async def list_friends(
    get_friends_use_case: FromDishka[GetFriendsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> GetFriendsResponse:
    """Friends of the caller ordered by username."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_friends_use_case.execute(GetFriendsRequest(user_id=user.user_id))


@router.post(
    "/requests",
    response_model=FriendRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_friend_request(
    request: SendFriendRequestAPIRequest,
    send_request_use_case: FromDishka[SendFriendRequestUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> FriendRequestResponse:
    """Send a friend request.

    Example:
        POST /friends/requests
        X-API-Key: ...

        Request:
        {"target": "alice"}

        409 if already friends or a request is pending either way,
        400 when sending to oneself, 404 for unknown users.
    """
    user = await authenticate(x_api_key, authenticate_use_case)
    return await send_request_use_case.execute(
        SendFriendRequestRequest(user_id=user.user_id, target=request.target)
    )


@router.get("/requests/incoming", response_model=GetFriendRequestsResponse)
async def list_incoming_requests(
    get_requests_use_case: FromDishka[GetFriendRequestsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> GetFriendRequestsResponse:
    """Pending requests addressed to the caller, newest first."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_requests_use_case.execute(
        GetFriendRequestsRequest(user_id=user.user_id, direction="incoming")
    )


@router.get("/requests/outgoing", response_model=GetFriendRequestsResponse)
async def list_outgoing_requests(
    get_requests_use_case: FromDishka[GetFriendRequestsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> GetFriendRequestsResponse:
    """Pending requests sent by the caller, newest first."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_requests_use_case.execute(
        GetFriendRequestsRequest(user_id=user.user_id, direction="outgoing")
    )


@router.post("/requests/{request_id}/accept", response_model=FriendRequestResponse)
async def accept_friend_request(
    request_id: UUID,
    accept_use_case: FromDishka[AcceptFriendRequestUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> FriendRequestResponse:
    """Accept a request addressed to the caller."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await accept_use_case.execute(
        RespondFriendRequestRequest(request_id=str(request_id), user_id=user.user_id)
    )


@router.post("/requests/{request_id}/reject", response_model=FriendRequestResponse)
async def reject_friend_request(
    request_id: UUID,
    reject_use_case: FromDishka[RejectFriendRequestUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> FriendRequestResponse:
    """Reject a request addressed to the caller."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await reject_use_case.execute(
        RespondFriendRequestRequest(request_id=str(request_id), user_id=user.user_id)
    )


@router.delete("/{friend_id}", response_model=RemoveFriendResponse)
async def remove_friend(
    friend_id: UUID,
    remove_friend_use_case: FromDishka[RemoveFriendUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> RemoveFriendResponse:
    """End a friendship. Removing a non-friend is not an error."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await remove_friend_use_case.execute(
        RemoveFriendRequest(user_id=user.user_id, friend_id=str(friend_id))
    )
