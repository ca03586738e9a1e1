"""Data models for gss-calendar."""

from __future__ import annotations

from gss_calendar.models.calendar import (
    CalendarEntry,
    EventTiming,
    Found,
    LookupResult,
    NoIdStored,
    NotFound,
)
from gss_calendar.models.schedule import (
    EditNotification,
    ScheduleRow,
    SkipReason,
    SyncAction,
    SyncResult,
)

__all__ = [
    "CalendarEntry",
    "EditNotification",
    "EventTiming",
    "Found",
    "LookupResult",
    "NoIdStored",
    "NotFound",
    "ScheduleRow",
    "SkipReason",
    "SyncAction",
    "SyncResult",
]
