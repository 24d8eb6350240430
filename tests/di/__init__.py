"""Mock providers for testing."""

from .clock import FROZEN_AT, FrozenClock, MockClockProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FROZEN_AT",
    "FrozenClock",
    "MockClockProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
