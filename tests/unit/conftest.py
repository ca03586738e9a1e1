"""In-memory adapters for sync tests."""

from __future__ import annotations

import itertools
from datetime import date, datetime

import pytest

from gss_calendar.config import SyncConfig
from gss_calendar.exceptions import CalendarAPIError, SheetsAPIError
from gss_calendar.models.calendar import CalendarEntry, EventTiming, Found, NotFound
from gss_calendar.models.schedule import ScheduleRow


class FakeRowStore:
    """Row storage backed by a dict of :class:`ScheduleRow`."""

    def __init__(self, *rows: ScheduleRow) -> None:
        self.rows = {r.row: r for r in rows}
        self.writes: list[tuple[int, dict[str, str]]] = []
        self.fail_writes = False

    def read_row(self, row: int) -> ScheduleRow:
        return self.rows[row]

    def write_fields(self, row: int, fields: dict[str, str]) -> None:
        if self.fail_writes:
            raise SheetsAPIError("write failed", status_code=500)
        self.writes.append((row, dict(fields)))
        self.rows[row] = self.rows[row].model_copy(update=dict(fields))


def _reminders(minutes: int | None) -> tuple[int, ...]:
    return () if minutes is None else (minutes,)


class FakeCalendar:
    """Calendar keeping entries in memory and recording every call."""

    def __init__(self) -> None:
        self.entries: dict[str, CalendarEntry] = {}
        self.calls: list[tuple] = []
        self.fail_on: set[str] = set()
        self.lookup_error: Exception | None = None
        self._ids = (f"evt-{n}" for n in itertools.count(1))

    def add(self, entry: CalendarEntry) -> CalendarEntry:
        self.entries[entry.id] = entry
        return entry

    def lookup_by_id(self, event_id: str) -> Found | NotFound:
        self.calls.append(("lookup_by_id", event_id))
        if self.lookup_error is not None:
            raise self.lookup_error
        if event_id in self.entries:
            return Found(entry=self.entries[event_id])
        return NotFound(event_id=event_id)

    def create_timed(
        self,
        title: str,
        start: datetime,
        end: datetime,
        *,
        location: str = "",
        description: str = "",
        reminder_minutes: int | None = None,
    ) -> CalendarEntry:
        self.calls.append(("create_timed", title, start, end, reminder_minutes))
        self._maybe_fail("create_timed")
        return self.add(
            CalendarEntry(
                id=next(self._ids),
                title=title,
                location=location,
                description=description,
                timing=EventTiming(all_day=False, start=start, end=end),
                reminder_minutes=_reminders(reminder_minutes),
            )
        )

    def create_all_day(
        self,
        title: str,
        day: date,
        *,
        location: str = "",
        description: str = "",
        reminder_minutes: int | None = None,
    ) -> CalendarEntry:
        self.calls.append(("create_all_day", title, day, reminder_minutes))
        self._maybe_fail("create_all_day")
        return self.add(
            CalendarEntry(
                id=next(self._ids),
                title=title,
                location=location,
                description=description,
                timing=EventTiming(all_day=True, start=day),
                reminder_minutes=_reminders(reminder_minutes),
            )
        )

    def update_entry(
        self,
        entry_id: str,
        *,
        title: str,
        location: str,
        description: str,
        timing: EventTiming,
    ) -> CalendarEntry:
        self.calls.append(("update_entry", entry_id, title))
        self._maybe_fail("update_entry")
        old = self.entries[entry_id]
        return self.add(
            CalendarEntry(
                id=entry_id,
                title=title,
                location=location,
                description=description,
                timing=timing,
                reminder_minutes=old.reminder_minutes,
            )
        )

    @property
    def mutating_calls(self) -> list[tuple]:
        return [c for c in self.calls if c[0] != "lookup_by_id"]

    def _maybe_fail(self, name: str) -> None:
        if name in self.fail_on:
            raise CalendarAPIError(f"{name} failed", status_code=500)


@pytest.fixture()
def config() -> SyncConfig:
    """Default configuration plus an English interview phase."""
    base = SyncConfig()
    return SyncConfig(trigger_phases=base.trigger_phases | {"1st interview"})


@pytest.fixture()
def calendar() -> FakeCalendar:
    return FakeCalendar()


@pytest.fixture()
def make_row():
    """Factory for schedule rows with a timed ES appointment at Acme."""

    def _make(**overrides: object) -> ScheduleRow:
        values: dict = {
            "row": 5,
            "company": "Acme",
            "start": datetime(2024, 4, 10, 10, 0),
            "end": datetime(2024, 4, 10, 11, 0),
            "location": "",
            "description": "",
            "status": "ES",
            "event_id": "",
            "prev_status": "",
        }
        values.update(overrides)
        return ScheduleRow(**values)

    return _make


@pytest.fixture()
def make_store():
    return FakeRowStore
