"""Send friend request use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devsocial.domain.model import FriendRequest
from devsocial.domain.service import FriendshipService
from devsocial.domain.value import FriendRequestStatus, UserId


class SendFriendRequestRequest(BaseModel):
    """Send friend request request."""

    user_id: str  # Sender, from authenticated user
    target: str  # Recipient user ID or username


class FriendRequestResponse(BaseModel):
    """A friend request after an operation on it."""

    request_id: str
    from_user_id: str
    to_user_id: str
    status: FriendRequestStatus
    created_at: datetime
    responded_at: datetime | None

    @classmethod
    def from_request(cls, friend_request: FriendRequest) -> "FriendRequestResponse":
        return cls(
            request_id=str(friend_request.id),
            from_user_id=str(friend_request.from_user_id),
            to_user_id=str(friend_request.to_user_id),
            status=friend_request.status,
            created_at=friend_request.created_at,
            responded_at=friend_request.responded_at,
        )


class SendFriendRequestUseCase:
    """Use case for sending a friend request."""

    def __init__(self, friendship_service: FriendshipService) -> None:
        """Initialize send friend request use case.

        Args:
            friendship_service: Friendship domain service
        """
        self.friendship_service = friendship_service

    async def execute(self, request: SendFriendRequestRequest) -> FriendRequestResponse:
        """Execute send request flow.

        Raises:
            NotFoundError: If the recipient does not exist
            InvalidOperationError: If the recipient is the sender
            ConflictError: If already friends or a request is pending
        """
        friend_request = await self.friendship_service.send_request(
            UserId(UUID(request.user_id)), request.target.strip()
        )
        return FriendRequestResponse.from_request(friend_request)
