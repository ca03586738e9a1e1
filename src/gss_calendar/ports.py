"""Adapter interfaces used by the sync orchestrator.

The orchestrator depends on these protocols, never on a concrete Google
client, so tests can drive it with in-memory fakes.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Protocol, Union

from gss_calendar.models.calendar import CalendarEntry, EventTiming, Found, NotFound
from gss_calendar.models.schedule import ScheduleRow

PERSISTED_FIELDS: frozenset[str] = frozenset({"event_id", "prev_status"})
"""The only row fields the sync ever writes."""


class RowStore(Protocol):
    """Read and write schedule rows by logical field name."""

    def read_row(self, row: int) -> ScheduleRow: ...

    def write_fields(self, row: int, fields: Mapping[str, str]) -> None:
        """Write every field of *fields* to *row*, all or none."""
        ...


class CalendarAdapter(Protocol):
    """Calendar operations needed by the sync."""

    def lookup_by_id(self, event_id: str) -> Union[Found, NotFound]: ...

    def create_timed(
        self,
        title: str,
        start: datetime,
        end: datetime,
        *,
        location: str = "",
        description: str = "",
        reminder_minutes: int | None = None,
    ) -> CalendarEntry: ...

    def create_all_day(
        self,
        title: str,
        day: date,
        *,
        location: str = "",
        description: str = "",
        reminder_minutes: int | None = None,
    ) -> CalendarEntry: ...

    def update_entry(
        self,
        entry_id: str,
        *,
        title: str,
        location: str,
        description: str,
        timing: EventTiming,
    ) -> CalendarEntry: ...
