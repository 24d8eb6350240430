"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from devsocial.domain.model.user import User
from devsocial.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once (batch query, avoids N+1).

        Unknown IDs are skipped; no ordering is guaranteed.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        pass

    @abstractmethod
    async def find_by_api_key(self, api_key: str) -> Optional[User]:
        """Find the user owning an API key."""
        pass

    @abstractmethod
    async def search_by_username(
        self, query: str, exclude_user_id: UserId, limit: int
    ) -> list[User]:
        """Case-insensitive substring search on usernames.

        Args:
            query: Substring to look for
            exclude_user_id: User never included in the results
            limit: Maximum number of results

        Returns:
            Matching users ordered by username
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If another user already has this username
        """
        pass
