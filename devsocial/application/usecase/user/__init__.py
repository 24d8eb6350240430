"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .get_current_user import (
    AuthenticateRequest,
    AuthenticateUseCase,
    CurrentUserResponse,
    SettingsInfo,
)
from .update_settings import (
    UpdateAvatarRequest,
    UpdateAvatarUseCase,
    UpdateSettingsRequest,
    UpdateSettingsUseCase,
)

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "CurrentUserResponse",
    "SettingsInfo",
    "UpdateAvatarRequest",
    "UpdateAvatarUseCase",
    "UpdateSettingsRequest",
    "UpdateSettingsUseCase",
]
