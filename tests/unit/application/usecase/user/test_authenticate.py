"""Unit tests for user use cases."""

import pytest

from devsocial.application.usecase.user import (
    AuthenticateRequest,
    AuthenticateUseCase,
    CreateUserRequest,
    CreateUserUseCase,
    UpdateSettingsRequest,
    UpdateSettingsUseCase,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAndAuthenticate:
    @pytest.mark.asyncio
    async def test_api_key_resolves_created_user(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateUserUseCase)
        authenticate = await unit_env.get(AuthenticateUseCase)
        created = await create.execute(
            CreateUserRequest(username="alice", credential_hash="hash")
        )

        # Act
        current = await authenticate.execute(AuthenticateRequest(api_key=created.api_key))
        unknown = await authenticate.execute(AuthenticateRequest(api_key="nope"))

        # Assert
        assert current.user_id == created.user_id
        assert current.username == "alice"
        assert unknown is None


class TestUpdateSettingsUseCase:
    @pytest.mark.asyncio
    async def test_threshold_clamped_in_response(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateUserUseCase)
        update = await unit_env.get(UpdateSettingsUseCase)
        created = await create.execute(
            CreateUserRequest(username="alice", credential_hash="hash")
        )

        # Act
        response = await update.execute(
            UpdateSettingsRequest(
                user_id=created.user_id, auto_post=True, post_threshold=99
            )
        )

        # Assert
        assert response.settings.auto_post is True
        assert response.settings.post_threshold == 24
