"""Clock abstraction for time-window decisions."""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Supplies the current instant.

    Services read the clock once per operation and reuse that instant for
    every window check in the operation.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware instant."""
        pass
