"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from devsocial.domain.model import User
from devsocial.domain.repository.user import UserRepository
from devsocial.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _ordered(self, users) -> list[User]:
        return sorted(users, key=lambda u: u.username.key)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID, ordered by username."""
        wanted = set(user_ids)
        return self._ordered(u for u in self._users.values() if u.id in wanted)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, case-insensitively."""
        for user in self._users.values():
            if user.username.key == username.key:
                return user
        return None

    async def find_by_api_key(self, api_key: str) -> Optional[User]:
        """Find the user owning an API key."""
        for user in self._users.values():
            if user.api_key == api_key:
                return user
        return None

    async def search_by_username(
        self, query: str, exclude_user_id: UserId, limit: int
    ) -> list[User]:
        """Case-insensitive substring search on usernames."""
        needle = query.lower()
        matches = self._ordered(
            u
            for u in self._users.values()
            if needle in u.username.key and u.id != exclude_user_id
        )
        return matches[:limit]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If another user already has this username
        """
        for other in self._users.values():
            if other.id != user.id and other.username.key == user.username.key:
                raise IntegrityError("Duplicate username", None, Exception())
        self._users[user.id] = user
        return user
