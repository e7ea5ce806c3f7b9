"""Clock capability used to read the current instant.

``now()`` takes a clock instead of reaching for the system time directly, so
callers and tests can supply a fixed instant.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from zoneinfo import ZoneInfo

from typing_extensions import override


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current wall-clock instant."""
        pass


class SystemClock(Clock):
    """Reads the operating system clock.

    Args:
        tz: IANA timezone name (e.g. "UTC"). ``None`` means local time.
    """

    def __init__(self, tz: str | None = None):
        self.zone: ZoneInfo | None = ZoneInfo(tz) if tz is not None else None

    @override
    def now(self) -> datetime:
        if self.zone is None:
            return datetime.now()
        return datetime.now(self.zone)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self.zone.key if self.zone else None!r})"


class FixedClock(Clock):
    """Always reports the same instant."""

    def __init__(self, moment: datetime):
        self.moment: datetime = moment

    @override
    def now(self) -> datetime:
        return self.moment

    def __repr__(self) -> str:
        return f"FixedClock({self.moment!r})"
