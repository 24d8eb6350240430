"""PostgreSQL implementation of Friendship repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, func, insert, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from devsocial.domain.model import FriendRequest
from devsocial.domain.repository import FriendshipRepository
from devsocial.domain.value import FriendRequestId, FriendRequestStatus, UserId
from devsocial.persistence.database import storage_errors
from devsocial.persistence.mappers import friend_request_to_dict, row_to_friend_request
from devsocial.persistence.tables import friend_requests_table, friendships_table

PENDING = FriendRequestStatus.PENDING.value


def _between(user_a: UserId, user_b: UserId):
    return or_(
        and_(
            friend_requests_table.c.from_user_id == user_a,
            friend_requests_table.c.to_user_id == user_b,
        ),
        and_(
            friend_requests_table.c.from_user_id == user_b,
            friend_requests_table.c.to_user_id == user_a,
        ),
    )


class PostgresFriendshipRepository(FriendshipRepository):
    """PostgreSQL implementation of FriendshipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def are_friends(self, user_id: UserId, other_id: UserId) -> bool:
        """Check whether an edge user_id -> other_id exists."""
        stmt = select(friendships_table.c.user_id).where(
            and_(
                friendships_table.c.user_id == user_id,
                friendships_table.c.friend_id == other_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_errors
    async def find_friend_ids(self, user_id: UserId) -> list[UserId]:
        """Find the targets of every edge owned by a user."""
        stmt = (
            select(friendships_table.c.friend_id)
            .where(friendships_table.c.user_id == user_id)
            .order_by(friendships_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [UserId(row.friend_id) for row in result.fetchall()]

    @storage_errors
    async def count_friends(self, user_id: UserId) -> int:
        """Count edges owned by a user."""
        stmt = (
            select(func.count())
            .select_from(friendships_table)
            .where(friendships_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @storage_errors
    async def remove_friendship(self, user_id: UserId, friend_id: UserId) -> bool:
        """Delete both directed edges in one statement."""
        stmt = delete(friendships_table).where(
            or_(
                and_(
                    friendships_table.c.user_id == user_id,
                    friendships_table.c.friend_id == friend_id,
                ),
                and_(
                    friendships_table.c.user_id == friend_id,
                    friendships_table.c.friend_id == user_id,
                ),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @storage_errors
    async def find_request_by_id(
        self, request_id: FriendRequestId
    ) -> Optional[FriendRequest]:
        """Find a friend request by ID."""
        stmt = select(friend_requests_table).where(
            friend_requests_table.c.id == request_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_friend_request(row._asdict()) if row else None

    @storage_errors
    async def exists_pending_between(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for a pending request in either direction."""
        stmt = select(friend_requests_table.c.id).where(
            and_(
                _between(user_a, user_b),
                friend_requests_table.c.status == PENDING,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @storage_errors
    async def save_request(self, request: FriendRequest) -> FriendRequest:
        """Create a pending friend request.

        The partial unique index on the unordered pair raises
        IntegrityError when a pending request already exists.
        """
        stmt = insert(friend_requests_table).values(**friend_request_to_dict(request))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return request

    @storage_errors
    async def accept_request(
        self, request_id: FriendRequestId, responded_at: datetime
    ) -> Optional[FriendRequest]:
        """Accept a pending request and insert both edges in one savepoint."""
        async with self.session.begin_nested():
            result = await self.session.execute(
                update(friend_requests_table)
                .where(
                    and_(
                        friend_requests_table.c.id == request_id,
                        friend_requests_table.c.status == PENDING,
                    )
                )
                .values(
                    status=FriendRequestStatus.ACCEPTED.value,
                    responded_at=responded_at,
                )
                .returning(friend_requests_table)
            )
            row = result.fetchone()
            if row is None:
                return None

            request = row_to_friend_request(row._asdict())
            edges = pg_insert(friendships_table).values(
                [
                    {
                        "user_id": request.from_user_id,
                        "friend_id": request.to_user_id,
                        "created_at": responded_at,
                    },
                    {
                        "user_id": request.to_user_id,
                        "friend_id": request.from_user_id,
                        "created_at": responded_at,
                    },
                ]
            )
            await self.session.execute(edges.on_conflict_do_nothing())

        return request

    @storage_errors
    async def reject_request(
        self, request_id: FriendRequestId, responded_at: datetime
    ) -> Optional[FriendRequest]:
        """Reject a pending request."""
        result = await self.session.execute(
            update(friend_requests_table)
            .where(
                and_(
                    friend_requests_table.c.id == request_id,
                    friend_requests_table.c.status == PENDING,
                )
            )
            .values(
                status=FriendRequestStatus.REJECTED.value,
                responded_at=responded_at,
            )
            .returning(friend_requests_table)
        )
        row = result.fetchone()
        await self.session.flush()
        return row_to_friend_request(row._asdict()) if row else None

    @storage_errors
    async def find_pending_to(self, user_id: UserId) -> list[FriendRequest]:
        """Pending requests addressed to a user, newest first."""
        stmt = (
            select(friend_requests_table)
            .where(
                and_(
                    friend_requests_table.c.to_user_id == user_id,
                    friend_requests_table.c.status == PENDING,
                )
            )
            .order_by(friend_requests_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_friend_request(row._asdict()) for row in result.fetchall()]

    @storage_errors
    async def find_pending_from(self, user_id: UserId) -> list[FriendRequest]:
        """Pending requests sent by a user, newest first."""
        stmt = (
            select(friend_requests_table)
            .where(
                and_(
                    friend_requests_table.c.from_user_id == user_id,
                    friend_requests_table.c.status == PENDING,
                )
            )
            .order_by(friend_requests_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_friend_request(row._asdict()) for row in result.fetchall()]
