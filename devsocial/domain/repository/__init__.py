"""Repository interfaces for the DevSocial domain.

Interfaces live in the domain layer (dependency inversion); PostgreSQL
and in-memory implementations live in the persistence layer.
"""

from devsocial.domain.repository.achievement import AchievementRepository
from devsocial.domain.repository.activity import ActivityRepository
from devsocial.domain.repository.friendship import FriendshipRepository
from devsocial.domain.repository.message import MessageRepository
from devsocial.domain.repository.user import UserRepository

__all__ = [
    "AchievementRepository",
    "ActivityRepository",
    "FriendshipRepository",
    "MessageRepository",
    "UserRepository",
]
