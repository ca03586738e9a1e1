"""Data models for calendar entries and lookups.

- :class:`EventTiming` -- resolved time representation written to the
  calendar (all-day date or timed range).
- :class:`CalendarEntry` -- the parts of a Google Calendar event the sync
  reads back.
- :class:`Found` / :class:`NotFound` / :class:`NoIdStored` -- outcome of
  looking up the entry referenced by a row's ``event_id``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union


@dataclass(frozen=True)
class EventTiming:
    """Time representation of a calendar entry.

    Attributes:
        all_day: Whether the entry is an all-day entry.
        start: A :class:`~datetime.date` for all-day entries, otherwise a
            :class:`~datetime.datetime`.
        end: End of a timed entry; always ``None`` for all-day entries.
    """

    all_day: bool
    start: date | datetime
    end: datetime | None = None


@dataclass(frozen=True)
class CalendarEntry:
    """A calendar entry as seen by the sync.

    Attributes:
        id: Calendar event ID; the only value persisted back to the sheet.
        title: Event summary.
        location: Event location (``""`` when unset).
        description: Event description (``""`` when unset).
        timing: All-day date or timed range, ``None`` if unparseable.
        reminder_minutes: Popup reminder offsets in minutes.
    """

    id: str
    title: str = ""
    location: str = ""
    description: str = ""
    timing: EventTiming | None = None
    reminder_minutes: tuple[int, ...] = ()


@dataclass(frozen=True)
class Found:
    """The stored ``event_id`` resolves to a live calendar entry."""

    entry: CalendarEntry


@dataclass(frozen=True)
class NotFound:
    """The stored ``event_id`` no longer resolves (deleted or lookup error)."""

    event_id: str
    reason: str = "not found"


@dataclass(frozen=True)
class NoIdStored:
    """The row has no ``event_id`` yet."""


LookupResult = Union[Found, NotFound, NoIdStored]
