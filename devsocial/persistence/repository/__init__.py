"""PostgreSQL repository implementations."""

from devsocial.persistence.repository.achievement import PostgresAchievementRepository
from devsocial.persistence.repository.activity import PostgresActivityRepository
from devsocial.persistence.repository.friendship import PostgresFriendshipRepository
from devsocial.persistence.repository.message import PostgresMessageRepository
from devsocial.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAchievementRepository",
    "PostgresActivityRepository",
    "PostgresFriendshipRepository",
    "PostgresMessageRepository",
    "PostgresUserRepository",
]
