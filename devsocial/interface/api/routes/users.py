"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel

from devsocial.application.usecase.friend import (
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
)
from devsocial.application.usecase.user import (
    AuthenticateUseCase,
    CurrentUserResponse,
    UpdateAvatarRequest,
    UpdateAvatarUseCase,
    UpdateSettingsRequest,
    UpdateSettingsUseCase,
)
from devsocial.interface.api.auth import authenticate

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateSettingsAPIRequest(BaseModel):
    """API request for updating sharing settings. Omitted fields are kept."""

    share_activity: bool | None = None
    share_project_name: bool | None = None
    share_language: bool | None = None
    auto_post: bool | None = None
    post_threshold: int | None = None


class UpdateAvatarAPIRequest(BaseModel):
    avatar_id: str


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> CurrentUserResponse:
    """Profile and settings of the caller."""
    return await authenticate(x_api_key, authenticate_use_case)


@router.patch("/me/settings", response_model=CurrentUserResponse)
async def update_settings(
    request: UpdateSettingsAPIRequest,
    update_settings_use_case: FromDishka[UpdateSettingsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> CurrentUserResponse:
    """Update sharing settings.

    Example:
        PATCH /users/me/settings
        X-API-Key: ...

        Request:
        {"share_project_name": false, "post_threshold": 40}

        Response carries post_threshold clamped to 24.
    """
    user = await authenticate(x_api_key, authenticate_use_case)
    return await update_settings_use_case.execute(
        UpdateSettingsRequest(user_id=user.user_id, **request.model_dump())
    )


@router.put("/me/avatar", response_model=CurrentUserResponse)
async def update_avatar(
    request: UpdateAvatarAPIRequest,
    update_avatar_use_case: FromDishka[UpdateAvatarUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> CurrentUserResponse:
    """Pick a preset avatar."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await update_avatar_use_case.execute(
        UpdateAvatarRequest(user_id=user.user_id, avatar_id=request.avatar_id)
    )


@router.get("/search", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    q: str = Query(default=""),
    x_api_key: str | None = Header(default=None),
) -> SearchUsersResponse:
    """Find users by part of their username."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await search_users_use_case.execute(
        SearchUsersRequest(user_id=user.user_id, query=q)
    )
