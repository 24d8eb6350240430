"""Get friends activity use case."""

from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.common import FriendActivityInfo
from devsocial.domain.service import PresenceFeedService
from devsocial.domain.value import UserId


class GetFriendsActivityRequest(BaseModel):
    """Get friends activity request."""

    user_id: str


class GetFriendsActivityResponse(BaseModel):
    """Friends presence feed, online first."""

    friends: list[FriendActivityInfo]


class GetFriendsActivityUseCase:
    """Use case for reading the friends presence feed."""

    def __init__(self, presence_feed_service: PresenceFeedService) -> None:
        self.presence_feed_service = presence_feed_service

    async def execute(
        self, request: GetFriendsActivityRequest
    ) -> GetFriendsActivityResponse:
        feed = await self.presence_feed_service.get_friends_activity(
            UserId(UUID(request.user_id))
        )
        return GetFriendsActivityResponse(
            friends=[FriendActivityInfo.from_activity(entry) for entry in feed]
        )
