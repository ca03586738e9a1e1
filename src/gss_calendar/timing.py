"""Date handling for schedule rows.

Covers three steps:

- :func:`parse_cell_datetime` -- coerce a raw sheet cell (Sheets serial
  number, date string, or ``datetime``) into a naive wall-clock
  ``datetime``.
- :func:`is_all_day` -- decide whether a row becomes an all-day entry.
- :func:`materialize` -- resolve the :class:`EventTiming` written to the
  calendar.  Create and update both go through it, so a timed entry
  without an end always gets the same one-hour default.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from gss_calendar.models.calendar import EventTiming

DEFAULT_DURATION = timedelta(hours=1)

# Day zero of the Sheets / Lotus serial date system.
_SERIAL_EPOCH = datetime(1899, 12, 30)

_STRING_FORMATS: tuple[str, ...] = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
)


class InvalidDateError(ValueError):
    """Raised when a cell value cannot be read as a calendar instant."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Not a valid date: {value!r}")
        self.value = value


def is_blank(value: object) -> bool:
    """Whether a cell value counts as absent."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_cell_datetime(value: object) -> datetime:
    """Coerce a sheet cell into a naive ``datetime``.

    Args:
        value: A ``datetime``, a ``date`` (taken as midnight), a Sheets
            serial number, or a string in ``YYYY/MM/DD[ HH:MM[:SS]]`` or
            ISO 8601 form.

    Returns:
        The parsed ``datetime``.

    Raises:
        InvalidDateError: If *value* is blank or not a recognisable date.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    # bool is an int subclass; a checkbox cell is never a date.
    if isinstance(value, bool):
        raise InvalidDateError(value)
    if isinstance(value, (int, float)):
        return _from_serial(value)
    if isinstance(value, str) and value.strip():
        return _from_string(value.strip())
    raise InvalidDateError(value)


def _from_serial(serial: float) -> datetime:
    if serial < 0:
        raise InvalidDateError(serial)
    try:
        # Round to whole seconds; fractional days carry float noise.
        return _SERIAL_EPOCH + timedelta(seconds=round(serial * 86400))
    except (OverflowError, ValueError) as exc:
        raise InvalidDateError(serial) from exc


def _from_string(text: str) -> datetime:
    for fmt in _STRING_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateError(text) from exc


def is_all_day(start: datetime, end: datetime | None) -> bool:
    """Decide whether a row becomes an all-day entry.

    A row is all-day when it has no end, or when its start is exactly
    00:00.  A midnight start wins even over an explicit later end: the
    sheet uses a bare date in the start column to mean "some time that
    day", and the end column is then ignored.

    Args:
        start: Parsed start.
        end: Parsed end, ``None`` when the cell is blank.
    """
    if end is None:
        return True
    return start.hour == 0 and start.minute == 0


def materialize(start: datetime, end: datetime | None) -> EventTiming:
    """Resolve the time representation written to the calendar.

    Args:
        start: Parsed start.
        end: Parsed end, ``None`` when the cell is blank.

    Returns:
        An all-day :class:`EventTiming` on the start's date, or a timed
        one ending at *end* (``start + 1 hour`` when *end* is ``None``).
    """
    if is_all_day(start, end):
        return EventTiming(all_day=True, start=start.date())
    return EventTiming(all_day=False, start=start, end=end or start + DEFAULT_DURATION)
