"""Console rendering of a single-row sync result.

:func:`format_sync_result` returns the text; :func:`print_sync_result`
writes it to stdout.
"""

from __future__ import annotations

import sys

from gss_calendar.models.schedule import SkipReason, SyncAction, SyncResult

_ACTION_LABELS: dict[SyncAction, str] = {
    SyncAction.CREATE: "created",
    SyncAction.CREATE_NEW_FOR_PHASE: "created (new phase)",
    SyncAction.UPDATE_IN_PLACE: "updated",
    SyncAction.SKIP: "skipped",
}

_SKIP_LABELS: dict[SkipReason, str] = {
    SkipReason.UNSYNCED_PHASE: "status is not a synced phase",
    SkipReason.INCOMPLETE_ROW: "company, start or status is empty",
    SkipReason.INVALID_DATE: "start or end is not a valid date",
    SkipReason.IGNORED_EDIT: "header row or other sheet",
}


def format_sync_result(result: SyncResult) -> str:
    """Render *result* as a few ``key: value`` lines."""
    label = _ACTION_LABELS[result.action]
    if result.dry_run and not result.skipped:
        label = f"would be {label}"

    lines = [f"Row {result.row}: {label}"]

    if result.skip_reason is not None:
        lines.append(f"  reason:   {_SKIP_LABELS[result.skip_reason]}")
    if result.title is not None:
        lines.append(f"  title:    {result.title}")
    if result.event_id:
        lines.append(f"  event id: {result.event_id}")
    if result.previous_event_id and result.previous_event_id != result.event_id:
        lines.append(f"  previous: {result.previous_event_id}")

    return "\n".join(lines)


def print_sync_result(result: SyncResult) -> None:
    """Format and print *result* to stdout."""
    sys.stdout.write(format_sync_result(result) + "\n")
