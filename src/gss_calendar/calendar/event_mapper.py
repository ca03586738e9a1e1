"""Map between sync models and Google Calendar event resources.

Builds request bodies for ``events().insert()`` and ``events().patch()``
and reads ``events().get()`` responses back into
:class:`~gss_calendar.models.calendar.CalendarEntry`.

All-day entries use the ``date`` form with the API's exclusive end date
(the following day).  Timed entries use ``dateTime`` plus the configured
IANA ``timeZone``; sheet values are naive wall-clock times in that zone.
"""

from __future__ import annotations

import contextlib
import logging
from datetime import date, datetime, timedelta

from gss_calendar.models.calendar import CalendarEntry, EventTiming

logger = logging.getLogger(__name__)


def map_timing(timing: EventTiming, timezone: str) -> dict:
    """Return the ``start`` / ``end`` fields for *timing*.

    The unused form is sent as ``None``: ``events().patch()`` merges nested
    objects, and a leftover ``dateTime`` next to a new ``date`` is rejected.
    """
    if timing.all_day:
        day = timing.start if not isinstance(timing.start, datetime) else timing.start.date()
        return {
            "start": {"date": day.isoformat(), "dateTime": None, "timeZone": None},
            "end": {
                "date": (day + timedelta(days=1)).isoformat(),
                "dateTime": None,
                "timeZone": None,
            },
        }
    return {
        "start": {"date": None, "dateTime": timing.start.isoformat(), "timeZone": timezone},
        "end": {"date": None, "dateTime": timing.end.isoformat(), "timeZone": timezone},
    }


def map_to_google_event(
    title: str,
    timing: EventTiming,
    timezone: str,
    *,
    location: str = "",
    description: str = "",
) -> dict:
    """Build a Google Calendar event body.

    Empty ``location`` and ``description`` are sent as empty strings so a
    patch clears values that were removed from the sheet.

    Args:
        title: Event summary.
        timing: All-day date or timed range.
        timezone: IANA timezone applied to timed entries.
        location: Venue text.
        description: Free-text notes.

    Returns:
        A ``dict`` conforming to the Event resource schema.
    """
    body: dict = {
        "summary": title,
        "location": location,
        "description": description,
        **map_timing(timing, timezone),
    }
    logger.debug("Mapped '%s' to event body: %s", title, body)
    return body


def popup_reminder(minutes_before: int) -> dict:
    """Return the ``reminders`` field for a single popup reminder."""
    return {
        "reminders": {
            "useDefault": False,
            "overrides": [{"method": "popup", "minutes": minutes_before}],
        }
    }


def parse_google_event(resource: dict) -> CalendarEntry:
    """Read an event resource back into a :class:`CalendarEntry`."""
    reminders = resource.get("reminders", {}).get("overrides", [])
    return CalendarEntry(
        id=resource["id"],
        title=resource.get("summary", ""),
        location=resource.get("location", ""),
        description=resource.get("description", ""),
        timing=_parse_timing(resource),
        reminder_minutes=tuple(r["minutes"] for r in reminders if "minutes" in r),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_timing(resource: dict) -> EventTiming | None:
    start = resource.get("start", {})
    end = resource.get("end", {})

    if "date" in start:
        with contextlib.suppress(ValueError):
            return EventTiming(all_day=True, start=date.fromisoformat(start["date"]))
        return None

    start_str = start.get("dateTime")
    end_str = end.get("dateTime")
    if start_str is None or end_str is None:
        return None
    try:
        start_dt = datetime.fromisoformat(start_str.replace("Z", "+00:00"))
        end_dt = datetime.fromisoformat(end_str.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable event times: %s / %s", start_str, end_str)
        return None
    return EventTiming(all_day=False, start=start_dt, end=end_dt)
