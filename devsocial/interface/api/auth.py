"""API key authentication for routes."""

from fastapi import HTTPException, status

from devsocial.application.usecase.user import (
    AuthenticateRequest,
    AuthenticateUseCase,
    CurrentUserResponse,
)

API_KEY_HEADER = "X-API-Key"


async def authenticate(
    api_key: str | None, authenticate_use_case: AuthenticateUseCase
) -> CurrentUserResponse:
    """Resolve the caller from the X-API-Key header.

    Raises:
        HTTPException: 401 if the key is missing or unknown
    """
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
        )

    user = await authenticate_use_case.execute(AuthenticateRequest(api_key=api_key))
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
    return user
