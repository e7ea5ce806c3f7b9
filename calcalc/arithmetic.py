"""Adding signed amounts of calendar units to a timestamp.

Fixed-length units (seconds through weeks) use plain ``timedelta``
arithmetic. Months and years are stepped with python-dateutil's
``relativedelta``, which clamps to the last valid day of the target month:
Jan 31 + 1 month is Feb 28 (or 29), and Feb 29 + 1 year is Feb 28.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Literal, TypeAlias

from dateutil.relativedelta import relativedelta

from calcalc.errors import InvalidAmount, OutOfRange
from calcalc.timestamp import CalendarTimestamp, coerce

logger = logging.getLogger(__name__)

Unit: TypeAlias = Literal[
    "second", "minute", "hour", "day", "week", "month", "year"
]

# timedelta keyword for each fixed-length unit
_FIXED_UNITS: dict[str, str] = {
    "second": "seconds",
    "minute": "minutes",
    "hour": "hours",
    "day": "days",
    "week": "weeks",
}

# relativedelta keyword for each calendar unit
_CALENDAR_UNITS: dict[str, str] = {
    "month": "months",
    "year": "years",
}

UNITS: tuple[str, ...] = (*_FIXED_UNITS, *_CALENDAR_UNITS)


def _normalize_unit(unit: str) -> str:
    """Accept singular or plural unit names in any case."""
    if isinstance(unit, str):
        name = unit.strip().lower()
        if name.endswith("s"):
            name = name[:-1]
        if name in UNITS:
            return name
    valid = ", ".join(UNITS)
    raise InvalidAmount(f"Invalid unit {unit!r}\nValid units: {valid}\n")


def _check_amount(amount: Any, unit: str) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(
            f"Amount of {unit}s must be an integer, "
            f"got {type(amount).__name__!r}: {amount!r}\n"
            f"Hint: express fractions in a smaller unit, "
            f"e.g. add(t, 90, 'minute') instead of add(t, 1.5, 'hour')"
        )
    return amount


def add(timestamp: Any, amount: int, unit: Unit | str) -> CalendarTimestamp:
    """
    Return ``timestamp`` shifted by ``amount`` units.

    Args:
        timestamp: Anything ``coerce`` accepts (CalendarTimestamp, string,
            datetime, date)
        amount: Signed integer count of units
        unit: "second", "minute", "hour", "day", "week", "month" or "year"
            (plural spellings are accepted)

    Returns:
        A new CalendarTimestamp

    Raises:
        InvalidAmount: If amount is not an integer or unit is unknown
        OutOfRange: If the result falls outside years 1..9999

    Example:
        >>> str(add("2023-01-31 00:00:00", 1, "month"))
        '2023-02-28 00:00:00'
    """
    start = coerce(timestamp)
    name = _normalize_unit(unit)
    count = _check_amount(amount, name)

    base = start.to_datetime()
    try:
        if name in _FIXED_UNITS:
            result: datetime = base + timedelta(**{_FIXED_UNITS[name]: count})
        else:
            result = base + relativedelta(**{_CALENDAR_UNITS[name]: count})
    except (OverflowError, ValueError) as exc:
        raise OutOfRange(
            f"{start} {count:+d} {name}(s) is outside the supported calendar "
            f"(years 1..9999)\n"
            f"Reason: {exc}"
        ) from exc

    logger.debug("%s %+d %s(s) -> %s", start, count, name, result)
    return CalendarTimestamp.from_datetime(result)


def add_seconds(timestamp: Any, amount: int) -> CalendarTimestamp:
    return add(timestamp, amount, "second")


def add_minutes(timestamp: Any, amount: int) -> CalendarTimestamp:
    return add(timestamp, amount, "minute")


def add_hours(timestamp: Any, amount: int) -> CalendarTimestamp:
    return add(timestamp, amount, "hour")


def add_days(timestamp: Any, amount: int) -> CalendarTimestamp:
    return add(timestamp, amount, "day")


def add_weeks(timestamp: Any, amount: int) -> CalendarTimestamp:
    return add(timestamp, amount, "week")


def add_months(timestamp: Any, amount: int) -> CalendarTimestamp:
    return add(timestamp, amount, "month")


def add_years(timestamp: Any, amount: int) -> CalendarTimestamp:
    return add(timestamp, amount, "year")
