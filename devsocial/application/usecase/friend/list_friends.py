"""Friend list and pending request list use cases."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.common import UserInfo
from devsocial.domain.service import FriendshipService
from devsocial.domain.value import UserId


class GetFriendsRequest(BaseModel):
    """Get friends request."""

    user_id: str


class GetFriendsResponse(BaseModel):
    """Friends ordered by username."""

    friends: list[UserInfo]


class GetFriendsUseCase:
    """Use case for listing a user's friends."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(self, request: GetFriendsRequest) -> GetFriendsResponse:
        friends = await self.friendship_service.get_friends(
            UserId(UUID(request.user_id))
        )
        return GetFriendsResponse(friends=[UserInfo.from_user(f) for f in friends])


class GetFriendRequestsRequest(BaseModel):
    """List pending requests addressed to (incoming) or sent by the user."""

    user_id: str
    direction: Literal["incoming", "outgoing"]


class PendingRequestInfo(BaseModel):
    """A pending request and the user on the other side."""

    request_id: str
    user: UserInfo
    created_at: datetime


class GetFriendRequestsResponse(BaseModel):
    """Pending requests, newest first."""

    requests: list[PendingRequestInfo]


class GetFriendRequestsUseCase:
    """Use case for listing pending friend requests."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(
        self, request: GetFriendRequestsRequest
    ) -> GetFriendRequestsResponse:
        user_id = UserId(UUID(request.user_id))
        if request.direction == "incoming":
            views = await self.friendship_service.get_incoming_requests(user_id)
        else:
            views = await self.friendship_service.get_outgoing_requests(user_id)

        return GetFriendRequestsResponse(
            requests=[
                PendingRequestInfo(
                    request_id=str(view.request.id),
                    user=UserInfo.from_user(view.other_user),
                    created_at=view.request.created_at,
                )
                for view in views
            ]
        )
