"""Friendship graph entities.

Business rules:
- Friendship edges are symmetric: (A, B) exists iff (B, A) exists
- No self edges
- At most one pending request per unordered pair of users
- Accepting a request is the only way edges are created
- Accepted and rejected requests never change again
"""

from datetime import datetime
from typing import Optional

from pydantic import model_validator

from devsocial.domain.model.common import DomainModel
from devsocial.domain.value import FriendRequestId, FriendRequestStatus, UserId


class Friendship(DomainModel):
    """One direction of a friendship edge."""

    user_id: UserId
    friend_id: UserId
    created_at: datetime

    @model_validator(mode="after")
    def validate_not_self(self) -> "Friendship":
        if self.user_id == self.friend_id:
            raise ValueError("A user cannot be friends with themselves")
        return self


class FriendRequest(DomainModel):
    """Friend request from one user to another."""

    id: FriendRequestId
    from_user_id: UserId
    to_user_id: UserId
    status: FriendRequestStatus = FriendRequestStatus.PENDING
    created_at: datetime
    responded_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_request(self) -> "FriendRequest":
        """Reject self requests and inconsistent response timestamps."""
        if self.from_user_id == self.to_user_id:
            raise ValueError("A user cannot send a friend request to themselves")
        if self.status.is_terminal and self.responded_at is None:
            raise ValueError(f"A {self.status.value} request needs responded_at")
        return self
