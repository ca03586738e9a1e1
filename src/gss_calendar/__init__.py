"""gss-calendar: recruitment schedule to Google Calendar sync.

Each edited row of the schedule sheet is classified as a new entry, a new
entry for a changed phase, or an in-place update, and the resulting event
ID is written back to the row.
"""

from __future__ import annotations

from gss_calendar.config import ColumnMap, ConfigError, SyncConfig, TitleRules, load_settings
from gss_calendar.decision import SyncDecision, check_row, decide
from gss_calendar.models import (
    CalendarEntry,
    EditNotification,
    EventTiming,
    Found,
    NoIdStored,
    NotFound,
    ScheduleRow,
    SkipReason,
    SyncAction,
    SyncResult,
)
from gss_calendar.sync import SyncOrchestrator
from gss_calendar.timing import InvalidDateError, is_all_day, materialize, parse_cell_datetime
from gss_calendar.title import format_title

__version__ = "0.1.0"

__all__ = [
    "CalendarEntry",
    "ColumnMap",
    "ConfigError",
    "EditNotification",
    "EventTiming",
    "Found",
    "InvalidDateError",
    "NoIdStored",
    "NotFound",
    "ScheduleRow",
    "SkipReason",
    "SyncAction",
    "SyncConfig",
    "SyncDecision",
    "SyncOrchestrator",
    "SyncResult",
    "TitleRules",
    "check_row",
    "decide",
    "format_title",
    "is_all_day",
    "load_settings",
    "materialize",
    "parse_cell_datetime",
]
