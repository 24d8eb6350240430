"""Chat message repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from devsocial.domain.model.message import ChatMessage
from devsocial.domain.value import UserId


class MessageRepository(ABC):
    """Repository for direct messages."""

    @abstractmethod
    async def save(self, message: ChatMessage) -> ChatMessage:
        """Store a new message."""
        pass

    @abstractmethod
    async def find_conversation(
        self, user_a: UserId, user_b: UserId, limit: int
    ) -> list[ChatMessage]:
        """Find the latest messages exchanged between two users.

        Args:
            user_a: One participant
            user_b: Other participant
            limit: Maximum number of messages

        Returns:
            Up to `limit` most recent messages, oldest first
        """
        pass

    @abstractmethod
    async def mark_read(
        self, from_user_id: UserId, to_user_id: UserId, read_at: datetime
    ) -> int:
        """Set read_at on unread messages from one user to another.

        Already-read messages keep their original read_at.

        Returns:
            Number of messages marked read
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Count unread messages addressed to a user."""
        pass
