"""Unit tests for the message use cases."""

import pytest

from devsocial.application.usecase.message import (
    ConversationRequest,
    GetConversationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    MarkConversationReadUseCase,
    SendMessageRequest,
    SendMessageUseCase,
)
from devsocial.domain.error import ForbiddenError
from tests.conftest import befriend, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMessageUseCases:
    @pytest.mark.asyncio
    async def test_send_read_and_count(self, unit_env):
        # Arrange
        send = await unit_env.get(SendMessageUseCase)
        conversation = await unit_env.get(GetConversationUseCase)
        mark_read = await unit_env.get(MarkConversationReadUseCase)
        unread = await unit_env.get(GetUnreadCountUseCase)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")
        await befriend(unit_env, alice, bob)

        # Act
        sent = await send.execute(
            SendMessageRequest(
                user_id=str(alice.id), friend_id=str(bob.id), content="ship it?"
            )
        )
        unread_before = await unread.execute(GetUnreadCountRequest(user_id=str(bob.id)))
        messages = await conversation.execute(
            ConversationRequest(user_id=str(bob.id), friend_id=str(alice.id))
        )
        marked = await mark_read.execute(
            ConversationRequest(user_id=str(bob.id), friend_id=str(alice.id))
        )
        unread_after = await unread.execute(GetUnreadCountRequest(user_id=str(bob.id)))

        # Assert
        assert sent.from_user_id == str(alice.id)
        assert [m.content for m in messages.messages] == ["ship it?"]
        assert unread_before.unread == 1
        assert marked.marked_read == 1
        assert unread_after.unread == 0

    @pytest.mark.asyncio
    async def test_message_to_stranger_forbidden(self, unit_env):
        send = await unit_env.get(SendMessageUseCase)
        alice = await make_user(unit_env, "alice")
        bob = await make_user(unit_env, "bob")

        with pytest.raises(ForbiddenError):
            await send.execute(
                SendMessageRequest(
                    user_id=str(alice.id), friend_id=str(bob.id), content="hi"
                )
            )
