"""Search users use case."""

from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.common import UserInfo
from devsocial.domain.service import FriendshipService
from devsocial.domain.value import UserId


class SearchUsersRequest(BaseModel):
    """Search users request."""

    user_id: str  # Searching user, excluded from results
    query: str


class SearchUsersResponse(BaseModel):
    """Matching users ordered by username."""

    users: list[UserInfo]


class SearchUsersUseCase:
    """Use case for finding people to befriend."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        users = await self.friendship_service.search_users(
            request.query, UserId(UUID(request.user_id))
        )
        return SearchUsersResponse(users=[UserInfo.from_user(u) for u in users])
