"""Entry point for ``python -m gss_calendar``.

Replays an edit on a schedule row and syncs it to Google Calendar, the
same path an edit trigger takes.  Uses stdlib :mod:`argparse`.

Subcommands:
    sync ROW -- Sync one row (``--dry-run`` decides without writing).

Exit codes:
    0 -- Run completed (including skipped rows).
    1 -- Configuration, authentication or API error.
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys

from google.auth.exceptions import GoogleAuthError

from gss_calendar.auth import get_credentials
from gss_calendar.calendar.client import GoogleCalendarClient
from gss_calendar.config import ConfigError, Settings, load_settings
from gss_calendar.exceptions import GoogleServiceError
from gss_calendar.log import setup_logging
from gss_calendar.models.schedule import EditNotification
from gss_calendar.output import print_sync_result
from gss_calendar.sheets.client import GoogleSheetsClient
from gss_calendar.sync import SyncOrchestrator


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="gss-calendar",
        description="Sync recruitment schedule rows to Google Calendar.",
    )
    subparsers = parser.add_subparsers(dest="command")

    sync_parser = subparsers.add_parser(
        "sync",
        help="Sync a single schedule row to the calendar.",
    )
    sync_parser.add_argument(
        "row",
        type=int,
        help="1-based row number in the schedule sheet.",
    )
    sync_parser.add_argument(
        "--sheet",
        type=str,
        default=None,
        help="Worksheet the edit happened on (defaults to SHEET_NAME).",
    )
    sync_parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Decide and report the action without touching calendar or sheet.",
    )
    sync_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def build_orchestrator(settings: Settings) -> SyncOrchestrator:
    """Wire the Google adapters for *settings* into a :class:`SyncOrchestrator`."""
    config = settings.sync_config()
    credentials = get_credentials(settings.credentials_file, settings.token_file)
    rows = GoogleSheetsClient(
        credentials,
        spreadsheet_id=settings.spreadsheet_id,
        sheet_name=config.sheet_name,
        columns=config.columns,
    )
    calendar = GoogleCalendarClient(
        credentials,
        calendar_id=config.calendar_id,
        timezone=settings.timezone,
    )
    return SyncOrchestrator(config, rows, calendar)


def _handle_sync(args: argparse.Namespace) -> int:
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    notification = EditNotification(
        sheet_name=args.sheet or settings.sheet_name,
        row=args.row,
    )
    try:
        orchestrator = build_orchestrator(settings)
        result = orchestrator.handle_edit(notification, dry_run=args.dry_run)
    except (GoogleServiceError, GoogleAuthError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_sync_result(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the gss-calendar CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.

    Returns:
        Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if args.command == "sync":
        return _handle_sync(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
