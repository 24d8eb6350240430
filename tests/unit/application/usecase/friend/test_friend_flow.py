"""Unit tests for the friend request use cases."""

import pytest

from devsocial.application.usecase.friend import (
    AcceptFriendRequestUseCase,
    GetFriendRequestsRequest,
    GetFriendRequestsUseCase,
    GetFriendsRequest,
    GetFriendsUseCase,
    RemoveFriendRequest,
    RemoveFriendUseCase,
    RespondFriendRequestRequest,
    SearchUsersRequest,
    SearchUsersUseCase,
    SendFriendRequestRequest,
    SendFriendRequestUseCase,
)
from devsocial.domain.error import ConflictError
from devsocial.domain.value import FriendRequestStatus
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFriendRequestFlow:
    """Send, list, accept, list friends, remove."""

    @pytest.mark.asyncio
    async def test_full_flow(self, unit_env):
        # Arrange
        send = await unit_env.get(SendFriendRequestUseCase)
        accept = await unit_env.get(AcceptFriendRequestUseCase)
        list_requests = await unit_env.get(GetFriendRequestsUseCase)
        list_friends = await unit_env.get(GetFriendsUseCase)
        remove = await unit_env.get(RemoveFriendUseCase)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")

        # Act
        sent = await send.execute(
            SendFriendRequestRequest(user_id=str(alice.id), target="bob")
        )
        incoming = await list_requests.execute(
            GetFriendRequestsRequest(user_id=str(bob.id), direction="incoming")
        )
        accepted = await accept.execute(
            RespondFriendRequestRequest(request_id=sent.request_id, user_id=str(bob.id))
        )
        friends = await list_friends.execute(GetFriendsRequest(user_id=str(alice.id)))
        removed = await remove.execute(
            RemoveFriendRequest(user_id=str(alice.id), friend_id=str(bob.id))
        )

        # Assert
        assert sent.status is FriendRequestStatus.PENDING
        assert [r.user.username for r in incoming.requests] == ["alice"]
        assert accepted.status is FriendRequestStatus.ACCEPTED
        assert accepted.responded_at is not None
        assert [f.username for f in friends.friends] == ["bob"]
        assert removed.removed is True

    @pytest.mark.asyncio
    async def test_second_accept_conflicts(self, unit_env):
        # Arrange
        send = await unit_env.get(SendFriendRequestUseCase)
        accept = await unit_env.get(AcceptFriendRequestUseCase)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        sent = await send.execute(
            SendFriendRequestRequest(user_id=str(alice.id), target=str(bob.id))
        )
        respond = RespondFriendRequestRequest(
            request_id=sent.request_id, user_id=str(bob.id)
        )
        await accept.execute(respond)

        # Act / Assert
        with pytest.raises(ConflictError):
            await accept.execute(respond)


class TestSearchUsersUseCase:
    @pytest.mark.asyncio
    async def test_search_returns_public_info(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SearchUsersUseCase)
        alice = await make_user(unit_env, "alice")
        await make_user(unit_env, "bobby")
        await make_user(unit_env, "bob")

        # Act
        response = await use_case.execute(
            SearchUsersRequest(user_id=str(alice.id), query="bob")
        )

        # Assert
        assert [u.username for u in response.users] == ["bob", "bobby"]
