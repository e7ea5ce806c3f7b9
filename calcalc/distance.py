"""Elapsed-time distances between two timestamps.

A ``Distance`` is derived from three measurements: elapsed seconds, and the
number of Sundays and Saturdays in the span. Weekdays are counted with a
closed-form offset formula instead of walking every day of the range.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from calcalc.timestamp import coerce
from calcalc.util import (
    APPROX_DAYS_PER_MONTH,
    APPROX_DAYS_PER_YEAR,
    DAY,
    HOUR,
    MINUTE,
)

logger = logging.getLogger(__name__)

# Python weekday integers (Monday = 0, Sunday = 6)
SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True, kw_only=True)
class Distance:
    """Elapsed time between two instants, broken down by unit.

    Only ``seconds``, ``sundays`` and ``saturdays`` are supplied; every other
    field is derived from them once, at construction. ``months`` and
    ``years`` are rough estimates (30 and 365 days), not calendar-exact.
    """

    seconds: int
    sundays: int
    saturdays: int
    minutes: int = field(init=False)
    hours: int = field(init=False)
    days: int = field(init=False)
    weeks: int = field(init=False)
    months: int = field(init=False)
    years: int = field(init=False)
    working_days: int = field(init=False)

    def __post_init__(self) -> None:
        for name in ("seconds", "sundays", "saturdays"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"Distance {name} must be >= 0, got {value}")

        days = self.seconds // DAY
        derived = {
            "minutes": self.seconds // MINUTE,
            "hours": self.seconds // HOUR,
            "days": days,
            "weeks": days // 7,
            "months": days // APPROX_DAYS_PER_MONTH,
            "years": days // APPROX_DAYS_PER_YEAR,
            # Whole 24h periods can undercount the calendar dates spanned
            "working_days": max(days - self.sundays, 0),
        }
        for name, value in derived.items():
            object.__setattr__(self, name, value)

    def as_dict(self) -> dict[str, int]:
        """Return all ten fields in display order."""
        return {name: getattr(self, name) for name in _DISPLAY_ORDER}

    def __str__(self) -> str:
        """Brace-delimited ``key: value`` block, one field per line."""
        width = max(len(name) for name in _DISPLAY_ORDER)
        lines = [
            f"    {name:<{width}} : {value}" for name, value in self.as_dict().items()
        ]
        return "{\n" + "\n".join(lines) + "\n}"


_DISPLAY_ORDER = (
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
    "sundays",
    "saturdays",
    "working_days",
)


def count_weekday(start: date, end: date, weekday: int) -> int:
    """Count dates with the given weekday in ``start..end`` (both included).

    Args:
        start: First date of the span
        end: Last date of the span, must not precede ``start``
        weekday: Python weekday integer (Monday=0, Sunday=6)

    Returns:
        Number of matching dates; 0 when the span is shorter than the gap to
        the first match
    """
    if not 0 <= weekday <= 6:
        raise ValueError(f"weekday must be in range [0, 6], got {weekday}")
    if end < start:
        raise ValueError(f"end ({end}) must not precede start ({start})")

    days = (end - start).days
    offset = (weekday - start.weekday()) % 7
    return (days - offset) // 7 + 1


def count_sundays(start: date, end: date) -> int:
    return count_weekday(start, end, SUNDAY)


def count_saturdays(start: date, end: date) -> int:
    return count_weekday(start, end, SATURDAY)


def distance_between(first: Any, second: Any) -> Distance:
    """
    Measure the elapsed time between two timestamps.

    The arguments may come in either order; the earlier one is used as the
    start. Both are converted with ``coerce`` first, so strings in
    ``YYYY-MM-DD HH:MM:SS`` form, datetimes and dates are accepted.

    Args:
        first: One end of the span
        second: The other end of the span

    Returns:
        Distance with elapsed seconds and the Sunday/Saturday counts for the
        calendar dates spanned. Equal inputs give an all-zero Distance.

    Example:
        >>> d = distance_between("2023-01-12 00:00:00", "2024-05-08 00:00:00")
        >>> d.days, d.sundays, d.saturdays
        (482, 69, 69)
    """
    date1 = coerce(first)
    date2 = coerce(second)

    if date2 < date1:
        logger.debug("Swapping %s and %s so the span runs forward", date1, date2)
        date1, date2 = date2, date1

    if date1 == date2:
        return Distance(seconds=0, sundays=0, saturdays=0)

    total_seconds = int((date2.to_datetime() - date1.to_datetime()).total_seconds())
    sundays = count_sundays(date1.date(), date2.date())
    saturdays = count_saturdays(date1.date(), date2.date())
    logger.debug(
        "Distance %s -> %s: seconds=%d sundays=%d saturdays=%d",
        date1,
        date2,
        total_seconds,
        sundays,
        saturdays,
    )
    return Distance(seconds=total_seconds, sundays=sundays, saturdays=saturdays)
