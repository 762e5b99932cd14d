"""Clock implementations."""

from datetime import datetime, timedelta, timezone

from discuss.domain.service.clock import Clock


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock(Clock):
    """Clock that only moves when told to.

    Used by tests to step across the edit and restore windows.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime) -> None:
        """Jump to an absolute instant."""
        self._now = instant

    def advance(self, **kwargs: float) -> datetime:
        """Move forward by a timedelta given as keyword arguments.

        Example:
            clock.advance(minutes=16)
        """
        self._now = self._now + timedelta(**kwargs)
        return self._now
