"""Calendar timestamps and their fixed ``YYYY-MM-DD HH:MM:SS`` text form.

Every operation in calcalc works on ``CalendarTimestamp`` values. Strings are
parsed (and validated) once at the boundary, never manipulated directly.
"""

import re
from dataclasses import dataclass, fields
from datetime import date, datetime, time
from typing import Any

from calcalc.clock import Clock, SystemClock
from calcalc.errors import FormatError, InvalidCalendarDate
from calcalc.util import TIMESTAMP_PATTERN

_TIMESTAMP_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})", flags=re.ASCII
)


@dataclass(frozen=True, order=True, kw_only=True)
class CalendarTimestamp:
    """A valid Gregorian instant with one-second resolution.

    Field order matches chronological order, so the generated comparison
    methods sort timestamps by time.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"CalendarTimestamp.{f.name} must be an int, "
                    f"got {type(value).__name__!r}: {value!r}"
                )
        try:
            datetime(
                self.year, self.month, self.day, self.hour, self.minute, self.second
            )
        except ValueError as exc:
            raise InvalidCalendarDate(
                f"Not a valid calendar instant: "
                f"year={self.year}, month={self.month}, day={self.day}, "
                f"hour={self.hour}, minute={self.minute}, second={self.second}\n"
                f"Reason: {exc}"
            ) from exc

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CalendarTimestamp":
        """Build from a datetime, dropping microseconds and tzinfo."""
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    def to_datetime(self) -> datetime:
        """Return the equivalent naive datetime."""
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def weekday(self) -> int:
        """Day of the week, Monday is 0 and Sunday is 6."""
        return self.date().weekday()

    def __str__(self) -> str:
        return format(self)


def _render(moment: "CalendarTimestamp | datetime") -> str:
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def parse(text: str) -> CalendarTimestamp:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` string.

    Raises:
        TypeError: If ``text`` is not a string
        FormatError: If ``text`` does not match the pattern exactly
        InvalidCalendarDate: If the fields do not form a real date/time
    """
    if not isinstance(text, str):
        raise TypeError(
            f"Timestamp must be a string, got {type(text).__name__!r}: {text!r}"
        )
    match = _TIMESTAMP_RE.fullmatch(text)
    if match is None:
        raise FormatError(
            f"Timestamp {text!r} does not match {TIMESTAMP_PATTERN}\n"
            f"Example: '2023-01-12 09:30:00'"
        )
    year, month, day, hour, minute, second = (int(g) for g in match.groups())
    return CalendarTimestamp(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second
    )


def format(timestamp: CalendarTimestamp) -> str:
    """Render ``timestamp`` as a zero-padded ``YYYY-MM-DD HH:MM:SS`` string."""
    return _render(timestamp)


def now(clock: Clock | None = None) -> CalendarTimestamp:
    """Return the current instant as a CalendarTimestamp.

    The clock reading is rendered and parsed again, so it is validated exactly
    like user input.

    Args:
        clock: Source of the current time (default: local system clock)
    """
    moment = (clock or SystemClock()).now()
    return parse(_render(moment))


def coerce(value: Any) -> CalendarTimestamp:
    """Convert supported inputs to a CalendarTimestamp.

    Accepts:
    - CalendarTimestamp: returned unchanged
    - str: parsed with ``parse``
    - datetime: sub-second precision and tzinfo are dropped
    - date: midnight of that day

    Raises:
        TypeError: If value is an unsupported type
    """
    if isinstance(value, CalendarTimestamp):
        return value
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, datetime):
        return CalendarTimestamp.from_datetime(value)
    if isinstance(value, date):
        return CalendarTimestamp.from_datetime(datetime.combine(value, time.min))
    raise TypeError(
        f"Expected CalendarTimestamp, str, datetime, or date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  coerce('2023-01-12 00:00:00')\n"
        f"  coerce(datetime(2023, 1, 12, 9, 30))\n"
        f"  coerce(date(2023, 1, 12))"
    )
