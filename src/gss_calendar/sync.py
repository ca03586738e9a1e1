"""Single-row sync orchestrator.

Provides :class:`SyncOrchestrator`, which takes one edited schedule row to
the calendar and back:

1. read the row through the :class:`~gss_calendar.ports.RowStore`;
2. run the pre-lookup checks and stop on a skip;
3. look up the stored ``event_id`` (errors degrade to ``NotFound``);
4. :func:`~gss_calendar.decision.decide` the action;
5. call the :class:`~gss_calendar.ports.CalendarAdapter`;
6. write ``event_id`` / ``prev_status`` back to the row in one write.

Row fields are written only after the calendar call returned, and both
fields go through one :meth:`~gss_calendar.ports.RowStore.write_fields` call,
so a row never pairs a new ``event_id`` with a stale ``prev_status``.  A
failing calendar call propagates to the caller and leaves the row untouched, so the
next edit of that row retries from the same state.
"""

from __future__ import annotations

import logging

from gss_calendar.config import SyncConfig
from gss_calendar.decision import SyncDecision, check_row, decide
from gss_calendar.log import row_context
from gss_calendar.models.calendar import CalendarEntry, LookupResult, NoIdStored, NotFound
from gss_calendar.models.schedule import (
    EditNotification,
    ScheduleRow,
    SkipReason,
    SyncAction,
    SyncResult,
)
from gss_calendar.ports import CalendarAdapter, RowStore

logger = logging.getLogger(__name__)


class SyncOrchestrator:
    """Sync one schedule row per edit.

    Args:
        config: Immutable sync configuration.
        rows: Row-storage adapter.
        calendar: Calendar adapter.
    """

    def __init__(self, config: SyncConfig, rows: RowStore, calendar: CalendarAdapter) -> None:
        self._config = config
        self._rows = rows
        self._calendar = calendar

    def handle_edit(self, notification: EditNotification, *, dry_run: bool = False) -> SyncResult:
        """Entry point for an edit notification.

        Edits on header rows or on other worksheets are ignored.
        """
        if (
            notification.sheet_name != self._config.sheet_name
            or notification.row <= self._config.header_rows
        ):
            logger.debug(
                "Ignoring edit on %r row %d", notification.sheet_name, notification.row
            )
            return SyncResult(
                row=notification.row,
                action=SyncAction.SKIP,
                skip_reason=SkipReason.IGNORED_EDIT,
                dry_run=dry_run,
            )
        return self.sync_row(notification.row, dry_run=dry_run)

    def sync_row(self, row_number: int, *, dry_run: bool = False) -> SyncResult:
        """Sync a single row to the calendar.

        Args:
            row_number: 1-based row number.
            dry_run: Decide only; make no calendar mutation and no row write.

        Returns:
            A :class:`SyncResult` describing what was (or would be) done.

        Raises:
            Exception: Any error from a calendar create/update call or a row
                write is propagated after logging.
        """
        with row_context(row_number):
            return self._sync(row_number, dry_run)

    def _sync(self, row_number: int, dry_run: bool) -> SyncResult:
        row = self._rows.read_row(row_number)

        checked = check_row(row, self._config)
        if isinstance(checked, SkipReason):
            logger.info("Row %d skipped (%s)", row_number, checked.value)
            return SyncResult(
                row=row_number,
                action=SyncAction.SKIP,
                skip_reason=checked,
                previous_event_id=row.event_id or None,
                dry_run=dry_run,
            )

        lookup = self._lookup(row)
        decision = decide(row, lookup, self._config)
        logger.info(
            "Row %d: %s '%s' (status=%r, prev_status=%r)",
            row_number,
            decision.action.value,
            decision.title,
            row.status,
            row.prev_status,
        )

        if dry_run:
            return self._result(row, decision, decision.entry_id, dry_run=True)

        try:
            if decision.action.creates_entry:
                event_id = self._create(row, decision).id
            else:
                event_id = self._update(row, decision).id
        except Exception as exc:
            logger.error(
                "Row %d: calendar %s failed, row left unchanged: %s",
                row_number,
                decision.action.value,
                exc,
            )
            raise

        fields = {"prev_status": row.status}
        if decision.action.creates_entry:
            fields["event_id"] = event_id
        self._rows.write_fields(row_number, fields)

        return self._result(row, decision, event_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _lookup(self, row: ScheduleRow) -> LookupResult:
        """Resolve the stored ``event_id``, folding any error into ``NotFound``."""
        if not row.event_id:
            return NoIdStored()
        try:
            return self._calendar.lookup_by_id(row.event_id)
        except Exception as exc:
            logger.warning(
                "Row %d: lookup of event %s failed, treating as not found: %s",
                row.row,
                row.event_id,
                exc,
            )
            return NotFound(event_id=row.event_id, reason=str(exc))

    def _create(self, row: ScheduleRow, decision: SyncDecision) -> CalendarEntry:
        timing = decision.timing
        if timing.all_day:
            return self._calendar.create_all_day(
                decision.title,
                timing.start,
                location=row.location,
                description=row.description,
                reminder_minutes=self._config.reminder_minutes,
            )
        return self._calendar.create_timed(
            decision.title,
            timing.start,
            timing.end,
            location=row.location,
            description=row.description,
            reminder_minutes=self._config.reminder_minutes,
        )

    def _update(self, row: ScheduleRow, decision: SyncDecision) -> CalendarEntry:
        return self._calendar.update_entry(
            decision.entry_id,
            title=decision.title,
            location=row.location,
            description=row.description,
            timing=decision.timing,
        )

    @staticmethod
    def _result(
        row: ScheduleRow,
        decision: SyncDecision,
        event_id: str | None,
        *,
        dry_run: bool = False,
    ) -> SyncResult:
        return SyncResult(
            row=row.row,
            action=decision.action,
            title=decision.title,
            event_id=event_id,
            previous_event_id=row.event_id or None,
            dry_run=dry_run,
        )
