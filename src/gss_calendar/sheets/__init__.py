"""Google Sheets row storage for gss-calendar."""

from __future__ import annotations

from gss_calendar.sheets.client import GoogleSheetsClient, column_letter

__all__ = ["GoogleSheetsClient", "column_letter"]
