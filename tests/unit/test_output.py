"""Tests for console rendering of sync results."""

from __future__ import annotations

import pytest

from gss_calendar.models.schedule import SkipReason, SyncAction, SyncResult
from gss_calendar.output import format_sync_result, print_sync_result


class TestFormatSyncResult:
    def test_created(self) -> None:
        text = format_sync_result(
            SyncResult(row=5, action=SyncAction.CREATE, title="[ES]Acme", event_id="evt-1")
        )

        assert text.splitlines() == [
            "Row 5: created",
            "  title:    [ES]Acme",
            "  event id: evt-1",
        ]

    def test_new_phase_shows_previous_entry(self) -> None:
        text = format_sync_result(
            SyncResult(
                row=5,
                action=SyncAction.CREATE_NEW_FOR_PHASE,
                title="[1次面接]Acme",
                event_id="evt-2",
                previous_event_id="evt-1",
            )
        )

        assert "created (new phase)" in text
        assert "previous: evt-1" in text

    def test_skip_reason(self) -> None:
        text = format_sync_result(
            SyncResult(row=4, action=SyncAction.SKIP, skip_reason=SkipReason.INVALID_DATE)
        )

        assert text.splitlines() == [
            "Row 4: skipped",
            "  reason:   start or end is not a valid date",
        ]

    def test_dry_run_label(self) -> None:
        text = format_sync_result(
            SyncResult(
                row=5,
                action=SyncAction.UPDATE_IN_PLACE,
                title="[ES]Acme",
                event_id="evt-1",
                previous_event_id="evt-1",
                dry_run=True,
            )
        )

        assert text.splitlines()[0] == "Row 5: would be updated"
        assert "previous" not in text

    def test_dry_run_skip_keeps_label(self) -> None:
        text = format_sync_result(
            SyncResult(
                row=1, action=SyncAction.SKIP, skip_reason=SkipReason.IGNORED_EDIT, dry_run=True
            )
        )

        assert text.splitlines()[0] == "Row 1: skipped"


def test_print_sync_result(capsys: pytest.CaptureFixture[str]) -> None:
    print_sync_result(SyncResult(row=2, action=SyncAction.SKIP, skip_reason=SkipReason.UNSYNCED_PHASE))

    assert capsys.readouterr().out == "Row 2: skipped\n  reason:   status is not a synced phase\n"
