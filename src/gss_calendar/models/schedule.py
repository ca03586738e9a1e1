"""Data models for schedule rows and sync outcomes.

- :class:`ScheduleRow` -- one row of the recruitment schedule, as read
  from the sheet (date cells are left unparsed).
- :class:`EditNotification` -- an edit event carrying a row coordinate.
- :class:`SyncAction` / :class:`SkipReason` -- classification produced by
  :func:`~gss_calendar.decision.decide`.
- :class:`SyncResult` -- what a single-row run did.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

CellValue = Union[datetime, date, str, int, float, None]


class ScheduleRow(BaseModel):
    """A single schedule row addressed by its 1-based row number.

    Text fields are normalised to strings so that blank cells and missing
    trailing cells compare equal to ``""``.  Surrounding whitespace is kept:
    the location marker matches the cell text literally.  ``start`` and ``end``
    keep the raw cell value; they are parsed and validated by the decision
    step so that an invalid date becomes a skip rather than a load error.

    Attributes:
        row: 1-based row number in the sheet.
        company: Organisation name.
        start: Raw start cell (required for sync).
        end: Raw end cell, ``None``/``""`` when unspecified.
        location: Venue, ``""`` when unspecified.
        description: Free text.
        status: Current recruitment phase.
        event_id: Calendar entry for the status segment in ``prev_status``.
        prev_status: Status at the last successful sync.
    """

    model_config = ConfigDict(frozen=True)

    row: int
    company: str = ""
    start: CellValue = None
    end: CellValue = None
    location: str = ""
    description: str = ""
    status: str = ""
    event_id: str = ""
    prev_status: str = ""

    @field_validator(
        "company",
        "location",
        "description",
        "status",
        "event_id",
        "prev_status",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)


@dataclass(frozen=True)
class EditNotification:
    """An edit on the schedule spreadsheet.

    Attributes:
        sheet_name: Name of the worksheet that was edited.
        row: 1-based row number of the edited cell.
    """

    sheet_name: str
    row: int


class SyncAction(str, enum.Enum):
    """Calendar mutation selected for a row."""

    CREATE = "create"
    CREATE_NEW_FOR_PHASE = "create_new_for_phase"
    UPDATE_IN_PLACE = "update_in_place"
    SKIP = "skip"

    @property
    def creates_entry(self) -> bool:
        return self in (SyncAction.CREATE, SyncAction.CREATE_NEW_FOR_PHASE)


class SkipReason(str, enum.Enum):
    """Why a row was left alone."""

    UNSYNCED_PHASE = "unsynced_phase"
    INCOMPLETE_ROW = "incomplete_row"
    INVALID_DATE = "invalid_date"
    IGNORED_EDIT = "ignored_edit"


@dataclass(frozen=True)
class SyncResult:
    """Outcome of syncing one row.

    Attributes:
        row: 1-based row number.
        action: The action that was decided.
        skip_reason: Set when ``action`` is :attr:`SyncAction.SKIP`.
        title: Rendered calendar title, ``None`` on skips.
        event_id: Calendar entry created or updated, ``None`` on skips.
        previous_event_id: ``event_id`` stored in the row before the run.
        dry_run: ``True`` when no calendar or sheet call was made.
    """

    row: int
    action: SyncAction
    skip_reason: SkipReason | None = None
    title: str | None = None
    event_id: str | None = None
    previous_event_id: str | None = None
    dry_run: bool = False

    @property
    def skipped(self) -> bool:
        return self.action is SyncAction.SKIP
