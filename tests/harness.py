"""Test harness building DI environments per test.

Unit tests run against in-memory repositories and a frozen clock.
Integration tests unmock persistence and need TEST_DATABASE_URL.
"""

import pytest_asyncio

from devsocial.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh container for the test
    and yields a request-scoped child of it.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_merge(unit_env):
            service = await unit_env.get(ActivityService)
            daily = await service.merge_activity(user_id, 60)
            assert daily.total_seconds == 60
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
