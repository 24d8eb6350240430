"""In-memory friendship repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from devsocial.domain.model import FriendRequest, Friendship
from devsocial.domain.repository.friendship import FriendshipRepository
from devsocial.domain.value import FriendRequestId, FriendRequestStatus, UserId


class InMemoryFriendshipRepository(FriendshipRepository):
    """In-memory implementation of FriendshipRepository for testing."""

    def __init__(self) -> None:
        self._edges: dict[tuple[UserId, UserId], Friendship] = {}
        self._requests: dict[FriendRequestId, FriendRequest] = {}

    async def are_friends(self, user_id: UserId, other_id: UserId) -> bool:
        """Check whether an edge user_id -> other_id exists."""
        return (user_id, other_id) in self._edges

    async def find_friend_ids(self, user_id: UserId) -> list[UserId]:
        """Find the targets of every edge owned by a user."""
        return [friend for (owner, friend) in self._edges if owner == user_id]

    async def count_friends(self, user_id: UserId) -> int:
        """Count edges owned by a user."""
        return len(await self.find_friend_ids(user_id))

    async def remove_friendship(self, user_id: UserId, friend_id: UserId) -> bool:
        """Delete both directed edges."""
        forward = self._edges.pop((user_id, friend_id), None)
        backward = self._edges.pop((friend_id, user_id), None)
        return forward is not None or backward is not None

    async def find_request_by_id(
        self, request_id: FriendRequestId
    ) -> Optional[FriendRequest]:
        """Find a friend request by ID."""
        return self._requests.get(request_id)

    def _pending_between(self, user_a: UserId, user_b: UserId) -> bool:
        pair = {user_a, user_b}
        return any(
            r.status is FriendRequestStatus.PENDING
            and {r.from_user_id, r.to_user_id} == pair
            for r in self._requests.values()
        )

    async def exists_pending_between(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for a pending request in either direction."""
        return self._pending_between(user_a, user_b)

    async def save_request(self, request: FriendRequest) -> FriendRequest:
        """Create a pending friend request.

        Raises:
            IntegrityError: If a pending request exists for the pair
        """
        if self._pending_between(request.from_user_id, request.to_user_id):
            raise IntegrityError("Duplicate pending request", None, Exception())
        self._requests[request.id] = request
        return request

    def _respond(
        self,
        request_id: FriendRequestId,
        status: FriendRequestStatus,
        responded_at: datetime,
    ) -> Optional[FriendRequest]:
        request = self._requests.get(request_id)
        if request is None or request.status is not FriendRequestStatus.PENDING:
            return None
        answered = request.model_copy(
            update={"status": status, "responded_at": responded_at}
        )
        self._requests[request_id] = answered
        return answered

    async def accept_request(
        self, request_id: FriendRequestId, responded_at: datetime
    ) -> Optional[FriendRequest]:
        """Accept a pending request and create both edges."""
        accepted = self._respond(
            request_id, FriendRequestStatus.ACCEPTED, responded_at
        )
        if accepted is None:
            return None

        for owner, friend in (
            (accepted.from_user_id, accepted.to_user_id),
            (accepted.to_user_id, accepted.from_user_id),
        ):
            self._edges.setdefault(
                (owner, friend),
                Friendship(user_id=owner, friend_id=friend, created_at=responded_at),
            )
        return accepted

    async def reject_request(
        self, request_id: FriendRequestId, responded_at: datetime
    ) -> Optional[FriendRequest]:
        """Reject a pending request."""
        return self._respond(request_id, FriendRequestStatus.REJECTED, responded_at)

    def _pending(self, predicate) -> list[FriendRequest]:
        return sorted(
            (
                r
                for r in self._requests.values()
                if r.status is FriendRequestStatus.PENDING and predicate(r)
            ),
            key=lambda r: r.created_at,
            reverse=True,
        )

    async def find_pending_to(self, user_id: UserId) -> list[FriendRequest]:
        """Pending requests addressed to a user, newest first."""
        return self._pending(lambda r: r.to_user_id == user_id)

    async def find_pending_from(self, user_id: UserId) -> list[FriendRequest]:
        """Pending requests sent by a user, newest first."""
        return self._pending(lambda r: r.from_user_id == user_id)
