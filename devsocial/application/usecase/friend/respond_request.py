"""Accept / reject friend request use cases."""

from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.friend.send_request import FriendRequestResponse
from devsocial.domain.service import FriendshipService
from devsocial.domain.value import FriendRequestId, UserId


class RespondFriendRequestRequest(BaseModel):
    """Answer to a friend request."""

    request_id: str
    user_id: str  # Acting user, must be the recipient


class AcceptFriendRequestUseCase:
    """Use case for accepting a friend request."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(
        self, request: RespondFriendRequestRequest
    ) -> FriendRequestResponse:
        """Execute accept flow.

        Raises:
            NotFoundError: If the request does not exist
            ForbiddenError: If the acting user is not the recipient
            ConflictError: If the request was already answered
        """
        accepted = await self.friendship_service.accept_request(
            FriendRequestId(UUID(request.request_id)), UserId(UUID(request.user_id))
        )
        return FriendRequestResponse.from_request(accepted)


class RejectFriendRequestUseCase:
    """Use case for rejecting a friend request."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        self.friendship_service = friendship_service

    async def execute(
        self, request: RespondFriendRequestRequest
    ) -> FriendRequestResponse:
        """Execute reject flow. Same errors as accepting."""
        rejected = await self.friendship_service.reject_request(
            FriendRequestId(UUID(request.request_id)), UserId(UUID(request.user_id))
        )
        return FriendRequestResponse.from_request(rejected)
