"""Update settings and avatar use cases."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.user.get_current_user import CurrentUserResponse
from devsocial.domain.service import UserService
from devsocial.domain.value import UserId


class UpdateSettingsRequest(BaseModel):
    """Partial settings update. Omitted fields keep their value."""

    user_id: str
    share_activity: Optional[bool] = None
    share_project_name: Optional[bool] = None
    share_language: Optional[bool] = None
    auto_post: Optional[bool] = None
    post_threshold: Optional[int] = None  # Clamped to 1..24 hours


class UpdateSettingsUseCase:
    """Use case for changing sharing preferences."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update settings use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateSettingsRequest) -> CurrentUserResponse:
        """Execute settings update.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.update_settings(
            UserId(UUID(request.user_id)),
            share_activity=request.share_activity,
            share_project_name=request.share_project_name,
            share_language=request.share_language,
            auto_post=request.auto_post,
            post_threshold=request.post_threshold,
        )
        return CurrentUserResponse.from_user(user)


class UpdateAvatarRequest(BaseModel):
    user_id: str
    avatar_id: str


class UpdateAvatarUseCase:
    """Use case for picking a preset avatar."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateAvatarRequest) -> CurrentUserResponse:
        """Raises ValidationError for malformed avatar ids."""
        user = await self.user_service.update_avatar(
            UserId(UUID(request.user_id)), request.avatar_id
        )
        return CurrentUserResponse.from_user(user)
