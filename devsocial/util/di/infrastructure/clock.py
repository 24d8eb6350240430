"""Clock infrastructure providers."""

from dishka import Scope, provide

from devsocial.util.clock import Clock
from devsocial.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock reading the system time."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide the wall clock."""
        return Clock()
