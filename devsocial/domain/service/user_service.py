"""User domain service."""

import secrets
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from devsocial.domain.error import ConflictError, NotFoundError, ValidationError
from devsocial.domain.model import User
from devsocial.domain.repository import UserRepository
from devsocial.domain.value import AvatarId, UserId, Username, UserSettings
from devsocial.util.clock import Clock

from .base import Service

POST_THRESHOLD_MIN = 1
POST_THRESHOLD_MAX = 24


def parse_username(raw: str) -> Username:
    """Parse a raw username, raising the domain ValidationError."""
    try:
        return Username(raw)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid username: {raw!r}") from e


class UserService(Service):
    """Domain service for the user directory and profile settings."""

    def __init__(self, user_repository: UserRepository, clock: Clock) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            clock: Wall-clock source
        """
        self.user_repository = user_repository
        self.clock = clock

    async def create_user(
        self,
        username: str,
        credential_hash: str,
        email: Optional[str] = None,
    ) -> User:
        """Register a new user with default sharing settings.

        Args:
            username: Requested username
            credential_hash: Hash produced by the authentication layer
            email: Optional contact email

        Returns:
            Created user, carrying a freshly generated API key

        Raises:
            ValidationError: If the username is malformed
            ConflictError: If the username is taken (case-insensitive)
        """
        with logfire.span("user_service.create_user", username=username):
            parsed = parse_username(username)
            if not credential_hash:
                raise ValidationError("Credential hash is required")

            existing = await self.user_repository.find_by_username(parsed)
            if existing:
                logfire.warn("Username taken", username=username)
                raise ConflictError(f"Username {username} is already taken")

            user = User(
                id=UserId(uuid4()),
                username=parsed,
                credential_hash=credential_hash,
                api_key=secrets.token_urlsafe(32),
                email=email,
                settings=UserSettings(),
                created_at=self.clock.now(),
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Concurrent registration of username", username=username)
                raise ConflictError(f"Username {username} is already taken")

            logfire.info("User created", user_id=str(saved.id), username=username)
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username, case-insensitively.

        Raises:
            NotFoundError: If no user has that username (or it is malformed)
        """
        with logfire.span("user_service.get_by_username", username=username):
            try:
                parsed = parse_username(username)
            except ValidationError:
                raise NotFoundError("User", username)

            user = await self.user_repository.find_by_username(parsed)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def get_by_api_key(self, api_key: str) -> Optional[User]:
        """Resolve the user owning an API key.

        Args:
            api_key: Opaque credential sent by the client

        Returns:
            User if the key is known, None otherwise
        """
        with logfire.span("user_service.get_by_api_key"):
            if not api_key:
                return None
            user = await self.user_repository.find_by_api_key(api_key)
            if not user:
                logfire.warn("Unknown API key", key_prefix=api_key[:4] + "...")
            return user

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID. Unknown IDs are absent."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(user_ids)
        return {user.id: user for user in users}

    async def update_settings(
        self,
        user_id: UserId,
        share_activity: Optional[bool] = None,
        share_project_name: Optional[bool] = None,
        share_language: Optional[bool] = None,
        auto_post: Optional[bool] = None,
        post_threshold: Optional[int] = None,
    ) -> User:
        """Update sharing preferences. Only provided fields change.

        `post_threshold` is clamped into [1, 24] hours.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_settings", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            changes: dict[str, object] = {}
            if share_activity is not None:
                changes["share_activity"] = share_activity
            if share_project_name is not None:
                changes["share_project_name"] = share_project_name
            if share_language is not None:
                changes["share_language"] = share_language
            if auto_post is not None:
                changes["auto_post"] = auto_post
            if post_threshold is not None:
                changes["post_threshold"] = max(
                    POST_THRESHOLD_MIN, min(POST_THRESHOLD_MAX, post_threshold)
                )

            settings = user.settings.model_copy(update=changes)
            updated = await self.user_repository.save(
                user.model_copy(update={"settings": settings})
            )
            logfire.info(
                "Settings updated", user_id=str(user_id), fields=sorted(changes)
            )
            return updated

    async def update_avatar(self, user_id: UserId, avatar_id: str) -> User:
        """Select a preset avatar.

        Raises:
            ValidationError: If the avatar id is not a short slug
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.update_avatar", user_id=str(user_id), avatar_id=avatar_id
        ):
            try:
                avatar = AvatarId(avatar_id)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid avatar id: {avatar_id!r}") from e

            user = await self.get_by_id(user_id)
            return await self.user_repository.save(
                user.model_copy(update={"avatar_id": avatar})
            )
