"""Google Sheets row storage.

Provides :class:`GoogleSheetsClient`, the concrete
:class:`~gss_calendar.ports.RowStore` backed by the Sheets API v4.
Fields are addressed by logical role through a
:class:`~gss_calendar.config.ColumnMap`; only ``event_id`` and
``prev_status`` can be written.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from google.auth.credentials import Credentials
from googleapiclient.discovery import build

from gss_calendar.config import ColumnMap
from gss_calendar.exceptions import translate_http_errors
from gss_calendar.models.schedule import ScheduleRow
from gss_calendar.ports import PERSISTED_FIELDS

logger = logging.getLogger(__name__)


def column_letter(column: int) -> str:
    """Convert a 1-based column number to its A1 letters (``28 -> "AB"``)."""
    if column < 1:
        raise ValueError(f"Column numbers start at 1, got {column}")
    letters = ""
    while column:
        column, remainder = divmod(column - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def quote_sheet_name(name: str) -> str:
    """Quote a worksheet name for use in an A1 range."""
    return "'" + name.replace("'", "''") + "'"


class GoogleSheetsClient:
    """Row storage for one worksheet of a spreadsheet.

    Args:
        credentials: Google credentials with the spreadsheets scope.
        spreadsheet_id: ID of the spreadsheet document.
        sheet_name: Worksheet holding the schedule.
        columns: Column roles.
        service: Optional pre-built ``googleapiclient`` service resource.
    """

    def __init__(
        self,
        credentials: Credentials | None,
        spreadsheet_id: str,
        sheet_name: str,
        columns: ColumnMap,
        service: Any | None = None,
    ) -> None:
        self._spreadsheet_id = spreadsheet_id
        self._sheet = quote_sheet_name(sheet_name)
        self._columns = columns
        self._service = service or build(
            "sheets", "v4", credentials=credentials, cache_discovery=False
        )

    @translate_http_errors("sheets")
    def read_row(self, row: int) -> ScheduleRow:
        """Read every logical field of *row*.

        Values are requested unformatted so that date cells arrive as
        serial numbers regardless of the sheet's display format.  Trailing
        empty cells are omitted by the API and read as blanks.
        """
        last = column_letter(self._columns.max_column)
        response = (
            self._service.spreadsheets()
            .values()
            .get(
                spreadsheetId=self._spreadsheet_id,
                range=f"{self._sheet}!A{row}:{last}{row}",
                valueRenderOption="UNFORMATTED_VALUE",
                dateTimeRenderOption="SERIAL_NUMBER",
            )
            .execute()
        )
        values = response.get("values", [])
        cells = values[0] if values else []

        def cell(column: int) -> Any:
            return cells[column - 1] if column <= len(cells) else None

        fields = {name: cell(col) for name, col in self._columns.as_dict().items()}
        logger.debug("Row %d read: %s", row, fields)
        return ScheduleRow(row=row, **fields)

    def write_fields(self, row: int, fields: Mapping[str, str]) -> None:
        """Write *fields* into *row* with a single ``batchUpdate`` request.

        The Sheets API applies a ``batchUpdate`` as one unit, so either every
        field lands or none does.

        Raises:
            ValueError: If a field is not one of the persisted fields.
            SheetsAPIError: If the API call fails.
        """
        unknown = sorted(set(fields) - PERSISTED_FIELDS)
        if unknown:
            raise ValueError(f"Fields {unknown} are not writable")
        data = [
            {
                "range": f"{self._sheet}!{column_letter(getattr(self._columns, name))}{row}",
                "values": [[value]],
            }
            for name, value in fields.items()
        ]
        self._batch_update(data)
        logger.info("Row %d: wrote %s", row, dict(fields))

    @translate_http_errors("sheets")
    def _batch_update(self, data: list[dict]) -> None:
        # RAW keeps IDs and statuses from being reinterpreted as numbers/dates.
        self._service.spreadsheets().values().batchUpdate(
            spreadsheetId=self._spreadsheet_id,
            body={"valueInputOption": "RAW", "data": data},
        ).execute()
