"""Remove friend use case."""

from uuid import UUID

from pydantic import BaseModel

from devsocial.domain.service import FriendshipService
from devsocial.domain.value import UserId


class RemoveFriendRequest(BaseModel):
    """Remove friend request."""

    user_id: str
    friend_id: str


class RemoveFriendResponse(BaseModel):
    """Remove friend response."""

    removed: bool  # False when the users were not friends


class RemoveFriendUseCase:
    """Use case for ending a friendship. Idempotent."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(self, request: RemoveFriendRequest) -> RemoveFriendResponse:
        removed = await self.friendship_service.remove_friend(
            UserId(UUID(request.user_id)), UserId(UUID(request.friend_id))
        )
        return RemoveFriendResponse(removed=removed)
