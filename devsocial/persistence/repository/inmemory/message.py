"""In-memory message repository for testing."""

from datetime import datetime

from devsocial.domain.model import ChatMessage
from devsocial.domain.repository.message import MessageRepository
from devsocial.domain.value import UserId


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []

    async def save(self, message: ChatMessage) -> ChatMessage:
        """Store a new message."""
        self._messages.append(message)
        return message

    async def find_conversation(
        self, user_a: UserId, user_b: UserId, limit: int
    ) -> list[ChatMessage]:
        """Latest messages between two users, oldest first."""
        pair = {user_a, user_b}
        conversation = sorted(
            (m for m in self._messages if {m.from_user_id, m.to_user_id} == pair),
            key=lambda m: m.created_at,
        )
        return conversation[-limit:]

    async def mark_read(
        self, from_user_id: UserId, to_user_id: UserId, read_at: datetime
    ) -> int:
        """Set read_at on unread messages only."""
        marked = 0
        for index, message in enumerate(self._messages):
            if (
                message.from_user_id == from_user_id
                and message.to_user_id == to_user_id
                and message.read_at is None
            ):
                self._messages[index] = message.model_copy(update={"read_at": read_at})
                marked += 1
        return marked

    async def count_unread(self, user_id: UserId) -> int:
        """Count unread messages addressed to a user."""
        return sum(
            1 for m in self._messages if m.to_user_id == user_id and m.read_at is None
        )
