"""In-memory repository implementations for testing."""

from .achievement import InMemoryAchievementRepository
from .activity import InMemoryActivityRepository
from .friendship import InMemoryFriendshipRepository
from .message import InMemoryMessageRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAchievementRepository",
    "InMemoryActivityRepository",
    "InMemoryFriendshipRepository",
    "InMemoryMessageRepository",
    "InMemoryUserRepository",
]
