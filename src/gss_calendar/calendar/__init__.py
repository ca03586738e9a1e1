"""Google Calendar adapter for gss-calendar."""

from __future__ import annotations

from gss_calendar.calendar.client import GoogleCalendarClient
from gss_calendar.calendar.event_mapper import map_to_google_event, parse_google_event

__all__ = [
    "GoogleCalendarClient",
    "map_to_google_event",
    "parse_google_event",
]
