"""Error types raised by calcalc.

All of them derive from ``ValueError`` so callers that already guard input
validation with ``except ValueError`` keep working.
"""


class CalendarCalcError(ValueError):
    """Base class for every calcalc failure."""


class FormatError(CalendarCalcError):
    """Input string does not match ``YYYY-MM-DD HH:MM:SS``."""


class InvalidCalendarDate(CalendarCalcError):
    """Fields are well formed but do not name a real calendar instant."""


class InvalidAmount(CalendarCalcError):
    """Amount is not an integer, or the unit is not recognised."""


class OutOfRange(CalendarCalcError):
    """Arithmetic result falls outside years 1..9999."""
