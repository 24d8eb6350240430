"""Direct messaging domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from devsocial.config import SocialSettings
from devsocial.domain.error import (
    ForbiddenError,
    InvalidOperationError,
    ValidationError,
)
from devsocial.domain.model import ChatMessage
from devsocial.domain.repository import FriendshipRepository, MessageRepository
from devsocial.domain.value import MessageId, UserId
from devsocial.util.clock import Clock

from .base import Service
from .user_service import UserService


class MessageService(Service):
    """Domain service for direct messages between friends."""

    def __init__(
        self,
        message_repository: MessageRepository,
        friendship_repository: FriendshipRepository,
        user_service: UserService,
        clock: Clock,
        social_settings: SocialSettings,
    ) -> None:
        """Initialize message service.

        Args:
            message_repository: Message repository
            friendship_repository: Friendship graph
            user_service: User directory
            clock: Wall-clock source
            social_settings: Message length and page size limits
        """
        self.message_repository = message_repository
        self.friendship_repository = friendship_repository
        self.user_service = user_service
        self.clock = clock
        self.social_settings = social_settings

    async def send_message(
        self, from_user_id: UserId, to_user_id: UserId, content: str
    ) -> ChatMessage:
        """Send a message to a friend.

        Args:
            from_user_id: Sender
            to_user_id: Recipient
            content: Message text, surrounding whitespace is trimmed

        Returns:
            Stored message

        Raises:
            ValidationError: If the trimmed content is empty or too long
            InvalidOperationError: If sender and recipient are the same user
            NotFoundError: If the recipient does not exist
            ForbiddenError: If the users are not friends
        """
        with logfire.span(
            "message_service.send_message",
            from_user_id=str(from_user_id),
            to_user_id=str(to_user_id),
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Message cannot be empty")
            max_length = self.social_settings.message_max_length
            if len(content) > max_length:
                raise ValidationError(
                    f"Message must be at most {max_length} characters"
                )

            if from_user_id == to_user_id:
                raise InvalidOperationError("Cannot send a message to yourself")

            await self.user_service.get_by_id(to_user_id)

            if not await self.friendship_repository.are_friends(
                from_user_id, to_user_id
            ):
                logfire.warn(
                    "Message to non-friend",
                    from_user_id=str(from_user_id),
                    to_user_id=str(to_user_id),
                )
                raise ForbiddenError("Conversation", str(to_user_id), str(from_user_id))

            message = ChatMessage(
                id=MessageId(uuid4()),
                from_user_id=from_user_id,
                to_user_id=to_user_id,
                content=content,
                created_at=self.clock.now(),
            )
            saved = await self.message_repository.save(message)
            logfire.info("Message sent", message_id=str(saved.id))
            return saved

    async def get_conversation(
        self, user_id: UserId, friend_id: UserId, limit: Optional[int] = None
    ) -> list[ChatMessage]:
        """Latest messages between two users, oldest first.

        `limit` defaults to the configured page size and is clamped to it.

        Raises:
            ValidationError: If limit < 1
        """
        with logfire.span(
            "message_service.get_conversation",
            user_id=str(user_id),
            friend_id=str(friend_id),
        ):
            page_size = self.social_settings.conversation_page_size
            if limit is None:
                limit = page_size
            if limit < 1:
                raise ValidationError("limit must be at least 1")
            return await self.message_repository.find_conversation(
                user_id, friend_id, min(limit, page_size)
            )

    async def mark_conversation_read(self, user_id: UserId, friend_id: UserId) -> int:
        """Mark every unread message from the friend to the user as read.

        Returns:
            Number of messages newly marked read
        """
        with logfire.span(
            "message_service.mark_conversation_read",
            user_id=str(user_id),
            friend_id=str(friend_id),
        ):
            return await self.message_repository.mark_read(
                friend_id, user_id, self.clock.now()
            )

    async def get_unread_count(self, user_id: UserId) -> int:
        return await self.message_repository.count_unread(user_id)
