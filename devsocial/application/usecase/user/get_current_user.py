"""Current user view and API key authentication."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from devsocial.domain.model import User
from devsocial.domain.service import UserService


class SettingsInfo(BaseModel):
    """Sharing preferences."""

    share_activity: bool
    share_project_name: bool
    share_language: bool
    auto_post: bool
    post_threshold: int


class CurrentUserResponse(BaseModel):
    """The authenticated user's own profile."""

    user_id: str
    username: str
    email: Optional[str]
    avatar_id: Optional[str]
    settings: SettingsInfo
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "CurrentUserResponse":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email,
            avatar_id=user.avatar_id.root if user.avatar_id else None,
            settings=SettingsInfo(**user.settings.model_dump()),
            created_at=user.created_at,
        )


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    api_key: str


class AuthenticateUseCase:
    """Use case for resolving the API key sent with every request."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: AuthenticateRequest) -> Optional[CurrentUserResponse]:
        """Resolve an API key.

        Returns:
            The key's owner, None if the key is unknown
        """
        user = await self.user_service.get_by_api_key(request.api_key)
        return CurrentUserResponse.from_user(user) if user else None
