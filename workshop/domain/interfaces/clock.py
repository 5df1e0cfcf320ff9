"""
Domain clock interface.

Entities read every timestamp through this abstraction so that callers can
substitute a deterministic clock. The domain defines what it needs; the
default implementation only wraps the standard library.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime


class Clock(ABC):
    """Source of the current wall-clock time."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Get the current time.

        Returns:
            Timezone-aware datetime in UTC
        """
        pass


class UtcClock(Clock):
    """Clock backed by the system time in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


DEFAULT_CLOCK: Clock = UtcClock()
