"""Google Calendar adapter.

Provides :class:`GoogleCalendarClient`, the concrete
:class:`~gss_calendar.ports.CalendarAdapter` backed by the Calendar API v3:

- **Lookup** -- ``events().get()``; any failure, and events that were
  deleted on the calendar side, come back as :class:`NotFound`.
- **Create** -- ``events().insert()`` for timed and all-day entries, with
  the popup reminder in the same request.
- **Update** -- ``events().patch()`` of title, location, description and
  time representation.

Create and update calls are wrapped with
:func:`~gss_calendar.exceptions.translate_http_errors` and raise
:class:`~gss_calendar.exceptions.CalendarAPIError` on failure.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from google.auth.credentials import Credentials
from googleapiclient.discovery import build

from gss_calendar.calendar.event_mapper import (
    map_to_google_event,
    parse_google_event,
    popup_reminder,
)
from gss_calendar.exceptions import CalendarAPIError, translate_http_errors
from gss_calendar.models.calendar import CalendarEntry, EventTiming, Found, NotFound

logger = logging.getLogger(__name__)

# Apps Script stores iCal UIDs ("<event id>@google.com") in the sheet.
_ICAL_SUFFIX = "@google.com"


def api_event_id(event_id: str) -> str:
    """Return the Calendar API event ID for an ID read from the sheet."""
    if event_id.endswith(_ICAL_SUFFIX):
        return event_id[: -len(_ICAL_SUFFIX)]
    return event_id


class GoogleCalendarClient:
    """Calendar adapter for a single Google calendar.

    Args:
        credentials: Google credentials with the calendar scope.
        calendar_id: Target calendar (``"primary"`` for the user's own).
        timezone: IANA timezone of the sheet's wall-clock values.
        service: Optional pre-built ``googleapiclient`` service resource.
            If ``None``, one is built from *credentials*.  Pass a mock here
            in tests.
    """

    def __init__(
        self,
        credentials: Credentials | None,
        calendar_id: str,
        timezone: str,
        service: Any | None = None,
    ) -> None:
        self._calendar_id = calendar_id
        self._timezone = timezone
        self._service = service or build(
            "calendar", "v3", credentials=credentials, cache_discovery=False
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup_by_id(self, event_id: str) -> Found | NotFound:
        """Look up an event by ID.

        Never raises for API errors: a missing calendar entry is an
        expected condition and the sync recreates it.

        Args:
            event_id: Google Calendar event ID stored in the sheet.

        Returns:
            :class:`Found` with the entry, or :class:`NotFound`.
        """
        try:
            resource = self._get_event(event_id)
        except CalendarAPIError as exc:
            logger.warning("Event %s could not be looked up: %s", event_id, exc)
            return NotFound(event_id=event_id, reason=str(exc))

        # Deleted events stay readable for a while with status "cancelled".
        if resource.get("status") == "cancelled":
            logger.info("Event %s was deleted on the calendar", event_id)
            return NotFound(event_id=event_id, reason="cancelled")

        return Found(entry=parse_google_event(resource))

    @translate_http_errors("calendar")
    def _get_event(self, event_id: str) -> dict:
        return (
            self._service.events()
            .get(calendarId=self._calendar_id, eventId=api_event_id(event_id))
            .execute()
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

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
        """Create a timed entry from *start* to *end*."""
        timing = EventTiming(all_day=False, start=start, end=end)
        return self._insert(title, timing, location, description, reminder_minutes)

    def create_all_day(
        self,
        title: str,
        day: date,
        *,
        location: str = "",
        description: str = "",
        reminder_minutes: int | None = None,
    ) -> CalendarEntry:
        """Create an all-day entry on *day*."""
        if isinstance(day, datetime):
            day = day.date()
        timing = EventTiming(all_day=True, start=day)
        return self._insert(title, timing, location, description, reminder_minutes)

    @translate_http_errors("calendar")
    def _insert(
        self,
        title: str,
        timing: EventTiming,
        location: str,
        description: str,
        reminder_minutes: int | None,
    ) -> CalendarEntry:
        # One request: the entry and its reminder exist together or not at all.
        body = map_to_google_event(
            title, timing, self._timezone, location=location, description=description
        )
        if reminder_minutes is not None:
            body.update(popup_reminder(reminder_minutes))
        result = (
            self._service.events()
            .insert(calendarId=self._calendar_id, body=body)
            .execute()
        )
        logger.info("Created event '%s' (id=%s)", title, result.get("id", "?"))
        return parse_google_event(result)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    @translate_http_errors("calendar")
    def update_entry(
        self,
        entry_id: str,
        *,
        title: str,
        location: str,
        description: str,
        timing: EventTiming,
    ) -> CalendarEntry:
        """Patch title, location, description and time of an existing entry.

        Switching between all-day and timed replaces both ``start`` and
        ``end``, so the entry never keeps a stale half of the old form.

        Raises:
            CalendarNotFoundError: If the entry disappeared since lookup.
        """
        body = map_to_google_event(
            title, timing, self._timezone, location=location, description=description
        )
        result = (
            self._service.events()
            .patch(calendarId=self._calendar_id, eventId=entry_id, body=body)
            .execute()
        )
        logger.info("Updated event '%s' (id=%s)", title, entry_id)
        return parse_google_event(result)
