"""Tests for schedule and calendar data models."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from gss_calendar.models import (
    CalendarEntry,
    Found,
    NotFound,
    ScheduleRow,
    SkipReason,
    SyncAction,
    SyncResult,
)


class TestScheduleRow:
    """Normalisation of raw cell values."""

    def test_none_text_fields_become_empty(self) -> None:
        row = ScheduleRow(row=3, company=None, location=None, event_id=None)

        assert row.company == ""
        assert row.location == ""
        assert row.event_id == ""

    def test_text_fields_keep_whitespace(self) -> None:
        row = ScheduleRow(row=3, location=" online ", status="ES ")

        assert row.location == " online "
        assert row.status == "ES "

    def test_numeric_company_is_text(self) -> None:
        """Integral floats from unformatted cells keep no trailing '.0'."""
        row = ScheduleRow(row=3, company=7203.0)

        assert row.company == "7203"

    def test_date_cells_are_kept_raw(self) -> None:
        row = ScheduleRow(row=3, start=45392.5, end="2024/04/10 13:00")

        assert row.start == 45392.5
        assert row.end == "2024/04/10 13:00"

    def test_datetime_start(self) -> None:
        start = datetime(2024, 4, 10, 10, 0)

        assert ScheduleRow(row=3, start=start).start == start

    def test_row_is_frozen(self) -> None:
        row = ScheduleRow(row=3, company="Acme")

        with pytest.raises(ValidationError):
            row.company = "Other"  # type: ignore[misc]


class TestSyncAction:
    @pytest.mark.parametrize(
        ("action", "creates"),
        [
            (SyncAction.CREATE, True),
            (SyncAction.CREATE_NEW_FOR_PHASE, True),
            (SyncAction.UPDATE_IN_PLACE, False),
            (SyncAction.SKIP, False),
        ],
    )
    def test_creates_entry(self, action: SyncAction, creates: bool) -> None:
        assert action.creates_entry is creates


class TestSyncResult:
    def test_skipped_property(self) -> None:
        result = SyncResult(row=2, action=SyncAction.SKIP, skip_reason=SkipReason.INVALID_DATE)

        assert result.skipped

    def test_not_skipped(self) -> None:
        result = SyncResult(row=2, action=SyncAction.CREATE, event_id="evt-1")

        assert not result.skipped


class TestLookupResults:
    def test_found_wraps_entry(self) -> None:
        entry = CalendarEntry(id="evt-1", title="[ES]Acme")

        assert Found(entry=entry).entry.id == "evt-1"

    def test_not_found_default_reason(self) -> None:
        assert NotFound(event_id="evt-1").reason == "not found"
