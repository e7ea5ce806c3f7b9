import logging

from .arithmetic import (
    UNITS,
    Unit,
    add,
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_seconds,
    add_weeks,
    add_years,
)
from .clock import Clock, FixedClock, SystemClock
from .distance import (
    Distance,
    count_saturdays,
    count_sundays,
    count_weekday,
    distance_between,
)
from .errors import (
    CalendarCalcError,
    FormatError,
    InvalidAmount,
    InvalidCalendarDate,
    OutOfRange,
)
from .timestamp import CalendarTimestamp, coerce, format, now, parse
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarTimestamp",
    "Distance",
    "Clock",
    "SystemClock",
    "FixedClock",
    "Unit",
    "UNITS",
    "parse",
    "format",
    "now",
    "coerce",
    "distance_between",
    "count_weekday",
    "count_sundays",
    "count_saturdays",
    "add",
    "add_seconds",
    "add_minutes",
    "add_hours",
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
    "CalendarCalcError",
    "FormatError",
    "InvalidCalendarDate",
    "InvalidAmount",
    "OutOfRange",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
