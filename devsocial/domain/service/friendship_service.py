"""Friendship graph domain service."""

from dataclasses import dataclass
from typing import Union
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from devsocial.config import SocialSettings
from devsocial.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
)
from devsocial.domain.model import FriendRequest, User
from devsocial.domain.repository import FriendshipRepository, UserRepository
from devsocial.domain.value import FriendRequestId, FriendRequestStatus, UserId
from devsocial.util.clock import Clock

from .base import Service
from .user_service import UserService


@dataclass
class FriendRequestView:
    """A pending request together with the user on the other side."""

    request: FriendRequest
    other_user: User


class FriendshipService(Service):
    """Domain service for friend requests and friendship edges.

    Request lifecycle: pending -> accepted | rejected. Only accepting
    creates edges, and it creates both directions at once.
    """

    def __init__(
        self,
        friendship_repository: FriendshipRepository,
        user_repository: UserRepository,
        user_service: UserService,
        clock: Clock,
        social_settings: SocialSettings,
    ) -> None:
        """Initialize friendship service.

        Args:
            friendship_repository: Friendship graph
            user_repository: User repository, used for search
            user_service: User directory
            clock: Wall-clock source
            social_settings: Search limits
        """
        self.friendship_repository = friendship_repository
        self.user_repository = user_repository
        self.user_service = user_service
        self.clock = clock
        self.social_settings = social_settings

    async def _resolve_target(self, target: Union[UserId, UUID, str]) -> User:
        if isinstance(target, UUID):
            return await self.user_service.get_by_id(UserId(target))
        try:
            return await self.user_service.get_by_id(UserId(UUID(target)))
        except ValueError:
            return await self.user_service.get_by_username(target)

    async def send_request(
        self, from_user_id: UserId, target: Union[UserId, UUID, str]
    ) -> FriendRequest:
        """Send a friend request.

        Args:
            from_user_id: Sender
            target: Recipient ID, or recipient username

        Returns:
            The created pending request

        Raises:
            NotFoundError: If the recipient does not exist
            InvalidOperationError: If the recipient is the sender
            ConflictError: If the users are already friends or a pending
                request exists between them in either direction
        """
        with logfire.span(
            "friendship_service.send_request",
            from_user_id=str(from_user_id),
            target=str(target),
        ):
            recipient = await self._resolve_target(target)

            if recipient.id == from_user_id:
                logfire.warn("Self friend request", user_id=str(from_user_id))
                raise InvalidOperationError("Cannot send a friend request to yourself")

            if await self.friendship_repository.are_friends(from_user_id, recipient.id):
                raise ConflictError("Already friends")

            if await self.friendship_repository.exists_pending_between(
                from_user_id, recipient.id
            ):
                logfire.warn(
                    "Duplicate pending request",
                    from_user_id=str(from_user_id),
                    to_user_id=str(recipient.id),
                )
                raise ConflictError("A friend request is already pending")

            request = FriendRequest(
                id=FriendRequestId(uuid4()),
                from_user_id=from_user_id,
                to_user_id=recipient.id,
                status=FriendRequestStatus.PENDING,
                created_at=self.clock.now(),
            )

            try:
                saved = await self.friendship_repository.save_request(request)
            except IntegrityError:
                # Lost the race against a request from the other side
                logfire.warn(
                    "Concurrent pending request",
                    from_user_id=str(from_user_id),
                    to_user_id=str(recipient.id),
                )
                raise ConflictError("A friend request is already pending")

            logfire.info(
                "Friend request sent",
                request_id=str(saved.id),
                from_user_id=str(from_user_id),
                to_user_id=str(recipient.id),
            )
            return saved

    async def _get_request_for_recipient(
        self, request_id: FriendRequestId, acting_user_id: UserId
    ) -> FriendRequest:
        request = await self.friendship_repository.find_request_by_id(request_id)
        if not request:
            raise NotFoundError("FriendRequest", str(request_id))
        if request.to_user_id != acting_user_id:
            logfire.warn(
                "Friend request answered by non-recipient",
                request_id=str(request_id),
                user_id=str(acting_user_id),
            )
            raise ForbiddenError("FriendRequest", str(request_id), str(acting_user_id))
        if request.status is not FriendRequestStatus.PENDING:
            raise ConflictError(f"Friend request already {request.status.value}")
        return request

    async def accept_request(
        self, request_id: FriendRequestId, acting_user_id: UserId
    ) -> FriendRequest:
        """Accept a pending request and befriend both users.

        Raises:
            NotFoundError: If the request does not exist
            ForbiddenError: If the acting user is not the recipient
            ConflictError: If the request is not pending
        """
        with logfire.span(
            "friendship_service.accept_request",
            request_id=str(request_id),
            user_id=str(acting_user_id),
        ):
            await self._get_request_for_recipient(request_id, acting_user_id)

            accepted = await self.friendship_repository.accept_request(
                request_id, self.clock.now()
            )
            if accepted is None:
                # Answered concurrently between the read and the update
                raise ConflictError("Friend request already answered")

            logfire.info(
                "Friend request accepted",
                request_id=str(request_id),
                from_user_id=str(accepted.from_user_id),
                to_user_id=str(accepted.to_user_id),
            )
            return accepted

    async def reject_request(
        self, request_id: FriendRequestId, acting_user_id: UserId
    ) -> FriendRequest:
        """Reject a pending request. No edges are created.

        Raises:
            NotFoundError: If the request does not exist
            ForbiddenError: If the acting user is not the recipient
            ConflictError: If the request is not pending
        """
        with logfire.span(
            "friendship_service.reject_request",
            request_id=str(request_id),
            user_id=str(acting_user_id),
        ):
            await self._get_request_for_recipient(request_id, acting_user_id)

            rejected = await self.friendship_repository.reject_request(
                request_id, self.clock.now()
            )
            if rejected is None:
                raise ConflictError("Friend request already answered")

            logfire.info("Friend request rejected", request_id=str(request_id))
            return rejected

    async def remove_friend(self, user_id: UserId, friend_id: UserId) -> bool:
        """Delete the friendship in both directions. Idempotent.

        Returns:
            True if the users were friends
        """
        with logfire.span(
            "friendship_service.remove_friend",
            user_id=str(user_id),
            friend_id=str(friend_id),
        ):
            removed = await self.friendship_repository.remove_friendship(
                user_id, friend_id
            )
            if removed:
                logfire.info(
                    "Friendship removed", user_id=str(user_id), friend_id=str(friend_id)
                )
            return removed

    async def get_friends(self, user_id: UserId) -> list[User]:
        """Friends of a user ordered by username."""
        with logfire.span("friendship_service.get_friends", user_id=str(user_id)):
            friend_ids = await self.friendship_repository.find_friend_ids(user_id)
            friends = await self.user_service.get_many(friend_ids)
            return sorted(friends.values(), key=lambda user: user.username.key)

    async def get_incoming_requests(self, user_id: UserId) -> list[FriendRequestView]:
        """Pending requests addressed to the user, newest first."""
        requests = await self.friendship_repository.find_pending_to(user_id)
        return await self._with_other_user(requests, lambda r: r.from_user_id)

    async def get_outgoing_requests(self, user_id: UserId) -> list[FriendRequestView]:
        """Pending requests sent by the user, newest first."""
        requests = await self.friendship_repository.find_pending_from(user_id)
        return await self._with_other_user(requests, lambda r: r.to_user_id)

    async def _with_other_user(self, requests, other_id) -> list[FriendRequestView]:
        users = await self.user_service.get_many([other_id(r) for r in requests])
        return [
            FriendRequestView(request=r, other_user=users[other_id(r)])
            for r in requests
            if other_id(r) in users
        ]

    async def search_users(self, query: str, excluding_user_id: UserId) -> list[User]:
        """Case-insensitive substring search on usernames.

        Args:
            query: Part of a username
            excluding_user_id: Searching user, never part of the result

        Returns:
            Up to `search_limit` users ordered by username; empty when the
            query is shorter than the minimum length
        """
        with logfire.span("friendship_service.search_users", query=query):
            query = query.strip()
            if len(query) < self.social_settings.search_min_query_length:
                return []
            return await self.user_repository.search_by_username(
                query, excluding_user_id, self.social_settings.search_limit
            )
