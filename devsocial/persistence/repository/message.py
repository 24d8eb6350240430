"""PostgreSQL implementation of Message repository."""

from datetime import datetime

from sqlalchemy import and_, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devsocial.domain.model import ChatMessage
from devsocial.domain.repository import MessageRepository
from devsocial.domain.value import UserId
from devsocial.persistence.database import storage_errors
from devsocial.persistence.mappers import row_to_chat_message
from devsocial.persistence.tables import chat_messages_table


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_errors
    async def save(self, message: ChatMessage) -> ChatMessage:
        """Store a new message."""
        stmt = insert(chat_messages_table).values(**message.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return message

    @storage_errors
    async def find_conversation(
        self, user_a: UserId, user_b: UserId, limit: int
    ) -> list[ChatMessage]:
        """Latest messages between two users, oldest first."""
        stmt = (
            select(chat_messages_table)
            .where(
                or_(
                    and_(
                        chat_messages_table.c.from_user_id == user_a,
                        chat_messages_table.c.to_user_id == user_b,
                    ),
                    and_(
                        chat_messages_table.c.from_user_id == user_b,
                        chat_messages_table.c.to_user_id == user_a,
                    ),
                )
            )
            .order_by(chat_messages_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        messages = [row_to_chat_message(row._asdict()) for row in result.fetchall()]
        messages.reverse()
        return messages

    @storage_errors
    async def mark_read(
        self, from_user_id: UserId, to_user_id: UserId, read_at: datetime
    ) -> int:
        """Set read_at on unread messages only."""
        stmt = (
            update(chat_messages_table)
            .where(
                and_(
                    chat_messages_table.c.from_user_id == from_user_id,
                    chat_messages_table.c.to_user_id == to_user_id,
                    chat_messages_table.c.read_at.is_(None),
                )
            )
            .values(read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    @storage_errors
    async def count_unread(self, user_id: UserId) -> int:
        """Count unread messages addressed to a user."""
        stmt = select(func.count()).select_from(chat_messages_table).where(
            and_(
                chat_messages_table.c.to_user_id == user_id,
                chat_messages_table.c.read_at.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
