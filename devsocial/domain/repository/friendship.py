"""Friendship graph repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from devsocial.domain.model.friendship import FriendRequest
from devsocial.domain.value import FriendRequestId, UserId


class FriendshipRepository(ABC):
    """Repository for friendship edges and friend requests.

    Edges are stored in both directions. Implementations write and delete
    both directions in one atomic unit.
    """

    @abstractmethod
    async def are_friends(self, user_id: UserId, other_id: UserId) -> bool:
        """Check whether an edge user_id -> other_id exists."""
        pass

    @abstractmethod
    async def find_friend_ids(self, user_id: UserId) -> list[UserId]:
        """Find the targets of every edge owned by a user."""
        pass

    @abstractmethod
    async def count_friends(self, user_id: UserId) -> int:
        """Count edges owned by a user."""
        pass

    @abstractmethod
    async def remove_friendship(self, user_id: UserId, friend_id: UserId) -> bool:
        """Delete both directed edges between two users.

        Returns:
            True if an edge existed, False otherwise
        """
        pass

    @abstractmethod
    async def find_request_by_id(
        self, request_id: FriendRequestId
    ) -> Optional[FriendRequest]:
        """Find a friend request by ID."""
        pass

    @abstractmethod
    async def exists_pending_between(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for a pending request between two users in either direction."""
        pass

    @abstractmethod
    async def save_request(self, request: FriendRequest) -> FriendRequest:
        """Create a pending friend request.

        Raises:
            IntegrityError: If a pending request already exists for the
                unordered pair (uniqueness constraint)
        """
        pass

    @abstractmethod
    async def accept_request(
        self, request_id: FriendRequestId, responded_at: datetime
    ) -> Optional[FriendRequest]:
        """Accept a pending request and create both friendship edges.

        The status change and the two edge inserts are one atomic unit.
        Nothing is written if the request is not pending any more.

        Args:
            request_id: Request to accept
            responded_at: Response timestamp

        Returns:
            The accepted request, or None if it was not pending
        """
        pass

    @abstractmethod
    async def reject_request(
        self, request_id: FriendRequestId, responded_at: datetime
    ) -> Optional[FriendRequest]:
        """Reject a pending request. Creates no edges.

        Returns:
            The rejected request, or None if it was not pending
        """
        pass

    @abstractmethod
    async def find_pending_to(self, user_id: UserId) -> list[FriendRequest]:
        """Pending requests addressed to a user, newest first."""
        pass

    @abstractmethod
    async def find_pending_from(self, user_id: UserId) -> list[FriendRequest]:
        """Pending requests sent by a user, newest first."""
        pass
