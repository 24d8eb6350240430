"""Create user use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from devsocial.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request.

    The credential hash comes from the authentication layer; this service
    never sees a password.
    """

    username: str
    credential_hash: str
    email: Optional[str] = None


class CreateUserResponse(BaseModel):
    """Created user, including the API key for the editor extension."""

    user_id: str
    username: str
    api_key: str
    created_at: datetime


class CreateUserUseCase:
    """Use case for registering a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute registration.

        Raises:
            ValidationError: If the username is malformed
            ConflictError: If the username is taken
        """
        user = await self.user_service.create_user(
            request.username.strip(), request.credential_hash, request.email
        )
        return CreateUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            api_key=user.api_key,
            created_at=user.created_at,
        )
