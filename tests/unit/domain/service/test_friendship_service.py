"""Unit tests for FriendshipService."""

from uuid import uuid4

import pytest

from devsocial.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
)
from devsocial.domain.repository import FriendshipRepository
from devsocial.domain.service import FriendshipService
from devsocial.domain.value import FriendRequestId, FriendRequestStatus, UserId
from tests.conftest import befriend, make_user
from tests.di import FROZEN_AT
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSendRequest:
    """Tests for send_request."""

    @pytest.mark.asyncio
    async def test_send_by_username_case_insensitive(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "Bob")

        # Act
        request = await service.send_request(alice.id, "BOB")

        # Assert
        assert request.from_user_id == alice.id
        assert request.to_user_id == bob.id
        assert request.status is FriendRequestStatus.PENDING
        assert request.created_at == FROZEN_AT

    @pytest.mark.asyncio
    async def test_send_by_id_string(self, unit_env):
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")

        request = await service.send_request(alice.id, str(bob.id))

        assert request.to_user_id == bob.id

    @pytest.mark.asyncio
    async def test_self_request_rejected_without_record(self, unit_env):
        """A request to oneself is refused and nothing is stored."""
        # Arrange
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")

        # Act / Assert
        with pytest.raises(InvalidOperationError):
            await service.send_request(alice.id, alice.id)
        assert await service.get_outgoing_requests(alice.id) == []
        assert await service.get_incoming_requests(alice.id) == []

    @pytest.mark.asyncio
    async def test_unknown_recipient(self, unit_env):
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await service.send_request(alice.id, "nobody")
        with pytest.raises(NotFoundError):
            await service.send_request(alice.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_duplicate_pending_in_either_direction(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await service.send_request(alice.id, bob.id)

        # Act / Assert
        with pytest.raises(ConflictError):
            await service.send_request(alice.id, bob.id)
        with pytest.raises(ConflictError):
            await service.send_request(bob.id, alice.id)

    @pytest.mark.asyncio
    async def test_already_friends(self, unit_env):
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await befriend(unit_env, alice, bob)

        with pytest.raises(ConflictError):
            await service.send_request(bob.id, alice.id)


class TestRespondToRequest:
    """Tests for accept_request and reject_request."""

    @pytest.mark.asyncio
    async def test_accept_creates_symmetric_friendship(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        repo = await unit_env.get(FriendshipRepository)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        request = await service.send_request(alice.id, bob.id)

        # Act
        accepted = await service.accept_request(request.id, bob.id)

        # Assert
        assert accepted.status is FriendRequestStatus.ACCEPTED
        assert accepted.responded_at == FROZEN_AT
        assert await repo.are_friends(alice.id, bob.id)
        assert await repo.are_friends(bob.id, alice.id)
        assert await repo.count_friends(alice.id) == 1
        assert await repo.count_friends(bob.id) == 1
        assert await service.get_incoming_requests(bob.id) == []

    @pytest.mark.asyncio
    async def test_double_accept_conflicts(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        repo = await unit_env.get(FriendshipRepository)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        request = await service.send_request(alice.id, bob.id)
        await service.accept_request(request.id, bob.id)

        # Act / Assert
        with pytest.raises(ConflictError):
            await service.accept_request(request.id, bob.id)
        with pytest.raises(ConflictError):
            await service.reject_request(request.id, bob.id)
        assert await repo.count_friends(bob.id) == 1

    @pytest.mark.asyncio
    async def test_only_recipient_may_respond(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        request = await service.send_request(alice.id, bob.id)

        # Act / Assert
        with pytest.raises(ForbiddenError):
            await service.accept_request(request.id, alice.id)
        with pytest.raises(ForbiddenError):
            await service.reject_request(request.id, alice.id)

    @pytest.mark.asyncio
    async def test_unknown_request(self, unit_env):
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await service.accept_request(FriendRequestId(uuid4()), alice.id)

    @pytest.mark.asyncio
    async def test_reject_creates_no_edges_and_allows_new_request(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        repo = await unit_env.get(FriendshipRepository)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        request = await service.send_request(alice.id, bob.id)

        # Act
        rejected = await service.reject_request(request.id, bob.id)

        # Assert
        assert rejected.status is FriendRequestStatus.REJECTED
        assert not await repo.are_friends(alice.id, bob.id)
        again = await service.send_request(bob.id, alice.id)
        assert again.status is FriendRequestStatus.PENDING


class TestRemoveFriend:
    @pytest.mark.asyncio
    async def test_removal_deletes_both_directions(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        repo = await unit_env.get(FriendshipRepository)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await befriend(unit_env, alice, bob)

        # Act
        removed = await service.remove_friend(bob.id, alice.id)

        # Assert
        assert removed is True
        assert not await repo.are_friends(alice.id, bob.id)
        assert not await repo.are_friends(bob.id, alice.id)
        assert await service.remove_friend(alice.id, bob.id) is False


class TestListing:
    @pytest.mark.asyncio
    async def test_friends_ordered_by_username(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        zed = await make_user(unit_env, "zed")
        bob = await make_user(unit_env, "Bob")
        await befriend(unit_env, alice, zed)
        await befriend(unit_env, bob, alice)

        # Act
        friends = await service.get_friends(alice.id)

        # Assert
        assert [f.id for f in friends] == [bob.id, zed.id]

    @pytest.mark.asyncio
    async def test_pending_lists_carry_other_user(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await service.send_request(alice.id, bob.id)

        # Act
        incoming = await service.get_incoming_requests(bob.id)
        outgoing = await service.get_outgoing_requests(alice.id)

        # Assert
        assert [v.other_user.id for v in incoming] == [alice.id]
        assert [v.other_user.id for v in outgoing] == [bob.id]


class TestSearchUsers:
    @pytest.mark.asyncio
    async def test_substring_search_excludes_caller(self, unit_env):
        # Arrange
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        await make_user(unit_env, "malice")
        await make_user(unit_env, "bob")

        # Act
        results = await service.search_users("LIC", alice.id)

        # Assert
        assert [u.username.root for u in results] == ["malice"]

    @pytest.mark.asyncio
    async def test_short_query_returns_nothing(self, unit_env):
        service = await unit_env.get(FriendshipService)
        alice = await make_user(unit_env, "alice")
        await make_user(unit_env, "bob")

        assert await service.search_users(" b ", alice.id) == []
