"""Test configuration and shared helpers."""

from devsocial.domain.model import User
from devsocial.domain.repository import FriendshipRepository
from devsocial.domain.service import FriendshipService, UserService


async def make_user(env, username: str, **settings) -> User:
    """Create a user through the user service, optionally with settings.

    Args:
        env: Request-scoped test container
        username: Username of the new user
        **settings: Settings overrides passed to update_settings
    """
    user_service = await env.get(UserService)
    user = await user_service.create_user(username, credential_hash="hash")
    if settings:
        user = await user_service.update_settings(user.id, **settings)
    return user


async def befriend(env, user: User, other: User) -> None:
    """Make two users friends through a request and its acceptance."""
    friendship_service = await env.get(FriendshipService)
    request = await friendship_service.send_request(user.id, other.id)
    await friendship_service.accept_request(request.id, other.id)

    friendship_repo = await env.get(FriendshipRepository)
    assert await friendship_repo.are_friends(user.id, other.id)
