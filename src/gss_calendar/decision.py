"""Decide which calendar mutation a schedule row needs.

The decision is a pure function of the row, the lookup outcome for its
stored ``event_id`` and the :class:`~gss_calendar.config.SyncConfig`.
Rules are evaluated in order and the first match wins:

1. status is not a recognized phase        -> skip (``UNSYNCED_PHASE``)
2. company, start or status missing         -> skip (``INCOMPLETE_ROW``)
3. start invalid, or end given and invalid  -> skip (``INVALID_DATE``)
4. no id stored, or entry not found         -> ``CREATE``
5. entry found, status != prev_status       -> ``CREATE_NEW_FOR_PHASE``
6. entry found, status == prev_status       -> ``UPDATE_IN_PLACE``

A phase change is a new real-world appointment, so the previous phase's
entry is left on the calendar and a new one is created.  Same-phase edits
correct the existing appointment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from gss_calendar.config import SyncConfig
from gss_calendar.models.calendar import EventTiming, Found, LookupResult
from gss_calendar.models.schedule import ScheduleRow, SkipReason, SyncAction
from gss_calendar.timing import InvalidDateError, is_blank, materialize, parse_cell_datetime
from gss_calendar.title import format_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncDecision:
    """Classification of a row plus everything needed to act on it.

    Attributes:
        action: The selected mutation.
        skip_reason: Set only when ``action`` is ``SKIP``.
        title: Rendered calendar title (``None`` on skips).
        timing: Resolved all-day date or timed range (``None`` on skips).
        entry_id: Entry to update for ``UPDATE_IN_PLACE``.
    """

    action: SyncAction
    skip_reason: SkipReason | None = None
    title: str | None = None
    timing: EventTiming | None = None
    entry_id: str | None = None

    @classmethod
    def skip(cls, reason: SkipReason) -> SyncDecision:
        return cls(action=SyncAction.SKIP, skip_reason=reason)


@dataclass(frozen=True)
class ValidRow:
    """A row that passed the pre-lookup checks, with parsed dates."""

    row: ScheduleRow
    start: datetime
    end: datetime | None


def check_row(row: ScheduleRow, config: SyncConfig) -> ValidRow | SkipReason:
    """Run the checks that do not need the calendar (rules 1-3).

    The orchestrator calls this before looking up ``event_id`` so that
    skipped rows never reach the calendar service.

    Returns:
        The :class:`ValidRow` with parsed dates, or the :class:`SkipReason`.
    """
    if row.status not in config.trigger_phases:
        logger.debug("Row %d: status %r is not a synced phase", row.row, row.status)
        return SkipReason.UNSYNCED_PHASE

    if not row.company or is_blank(row.start) or not row.status:
        logger.debug("Row %d: company, start or status is empty", row.row)
        return SkipReason.INCOMPLETE_ROW

    try:
        start = parse_cell_datetime(row.start)
    except InvalidDateError:
        logger.warning("Row %d: start %r is not a valid date", row.row, row.start)
        return SkipReason.INVALID_DATE

    end = None
    if not is_blank(row.end):
        try:
            end = parse_cell_datetime(row.end)
        except InvalidDateError:
            logger.warning("Row %d: end %r is not a valid date", row.row, row.end)
            return SkipReason.INVALID_DATE

    return ValidRow(row=row, start=start, end=end)


def decide(row: ScheduleRow, lookup: LookupResult, config: SyncConfig) -> SyncDecision:
    """Classify *row* given the lookup outcome for its stored ``event_id``.

    Args:
        row: The schedule row as read from the sheet.
        lookup: :class:`Found`, :class:`NotFound` or :class:`NoIdStored`.
        config: Sync configuration (phases and title rules).

    Returns:
        The :class:`SyncDecision`.
    """
    checked = check_row(row, config)
    if isinstance(checked, SkipReason):
        return SyncDecision.skip(checked)

    title = format_title(row.status, row.company, row.location, config.title_rules)
    timing = materialize(checked.start, checked.end)

    if not isinstance(lookup, Found):
        return SyncDecision(action=SyncAction.CREATE, title=title, timing=timing)

    if row.status != row.prev_status:
        return SyncDecision(action=SyncAction.CREATE_NEW_FOR_PHASE, title=title, timing=timing)

    return SyncDecision(
        action=SyncAction.UPDATE_IN_PLACE,
        title=title,
        timing=timing,
        entry_id=lookup.entry.id,
    )
