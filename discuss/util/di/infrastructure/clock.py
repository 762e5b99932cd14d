"""Clock infrastructure providers."""

from dishka import Scope, provide

from discuss.adapter.clock import SystemClock
from discuss.domain.service import Clock
from discuss.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock provider reading the system time in UTC."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide system clock."""
        return SystemClock()
