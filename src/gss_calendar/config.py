"""Configuration loading for gss-calendar.

Reads settings from environment variables (with .env support via python-dotenv)
and validates that all required values are present.  The sync core never
reads the environment itself: :meth:`Settings.sync_config` turns the loaded
settings into an immutable :class:`SyncConfig` that is injected into the
orchestrator.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


DEFAULT_TRIGGER_PHASES: tuple[str, ...] = (
    "説明会",
    "ES",
    "WEBテスト",
    "ES＆WEBテスト",
    "1次面接",
    "2次面接",
    "3次面接",
    "最終面接",
)
"""Statuses that qualify a row for calendar sync."""

DEFAULT_REMINDER_MINUTES = 60


@dataclass(frozen=True)
class ColumnMap:
    """1-based column numbers for each logical field of a schedule row.

    Raises:
        ConfigError: If a column number is not positive or two roles share
            the same column.
    """

    company: int = 2
    start: int = 3
    end: int = 4
    status: int = 5
    description: int = 6
    location: int = 7
    event_id: int = 12
    prev_status: int = 13

    def __post_init__(self) -> None:
        columns = self.as_dict()
        bad = [name for name, col in columns.items() if col < 1]
        if bad:
            raise ConfigError(f"Column numbers must be positive: {', '.join(bad)}")
        if len(set(columns.values())) != len(columns):
            raise ConfigError(f"Column roles must not share a column: {columns}")

    def as_dict(self) -> dict[str, int]:
        return {
            "company": self.company,
            "start": self.start,
            "end": self.end,
            "status": self.status,
            "description": self.description,
            "location": self.location,
            "event_id": self.event_id,
            "prev_status": self.prev_status,
        }

    @property
    def max_column(self) -> int:
        """Right-most column that has to be read to load a full row."""
        return max(self.as_dict().values())


@dataclass(frozen=True)
class TitleRules:
    """Markers used when rendering calendar titles.

    Attributes:
        online_sentinel: Exact ``location`` text that means "online".
        online_mark: Marker rendered for online engagements.
        in_person_mark: Marker rendered for any other non-empty location.
        briefing_status: Status of the introductory-session phase.
        briefing_mark: Short form of *briefing_status* used next to a
            location marker.
    """

    online_sentinel: str = "オンライン"
    online_mark: str = "オ"
    in_person_mark: str = "対面"
    briefing_status: str = "説明会"
    briefing_mark: str = "説"


@dataclass(frozen=True)
class SyncConfig:
    """Immutable configuration consumed by the sync orchestrator.

    Attributes:
        sheet_name: Worksheet whose edits are synced.
        calendar_id: Google Calendar identifier (``"primary"`` by default).
        columns: Column roles of the schedule sheet.
        trigger_phases: Recognized phases; rows in any other status are
            never synced.
        title_rules: Markers for :func:`~gss_calendar.title.format_title`.
        reminder_minutes: Popup reminder attached to newly created entries.
        header_rows: Number of leading rows that never hold schedule data.
    """

    sheet_name: str = "kokochan"
    calendar_id: str = "primary"
    columns: ColumnMap = field(default_factory=ColumnMap)
    trigger_phases: frozenset[str] = frozenset(DEFAULT_TRIGGER_PHASES)
    title_rules: TitleRules = field(default_factory=TitleRules)
    reminder_minutes: int = DEFAULT_REMINDER_MINUTES
    header_rows: int = 1


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        spreadsheet_id: ID of the Google Sheets document holding the schedule.
        sheet_name: Worksheet name (default ``"kokochan"``).
        calendar_id: Target calendar (default ``"primary"``).
        credentials_file: OAuth client secrets or service-account key file.
        token_file: Cached OAuth user token.
        timezone: IANA timezone of the sheet's wall-clock values
            (default ``"Asia/Tokyo"``).
        log_level: Logging level (default ``"INFO"``).
        trigger_phases: Recognized phases, in sheet order.
    """

    spreadsheet_id: str
    sheet_name: str = "kokochan"
    calendar_id: str = "primary"
    credentials_file: str = "credentials.json"
    token_file: str = "token.json"
    timezone: str = "Asia/Tokyo"
    log_level: str = "INFO"
    trigger_phases: tuple[str, ...] = DEFAULT_TRIGGER_PHASES

    def sync_config(self) -> SyncConfig:
        """Build the immutable :class:`SyncConfig` for the orchestrator."""
        return SyncConfig(
            sheet_name=self.sheet_name,
            calendar_id=self.calendar_id,
            trigger_phases=frozenset(self.trigger_phases),
        )


_OPTIONAL = {
    "SHEET_NAME": "sheet_name",
    "CALENDAR_ID": "calendar_id",
    "GOOGLE_CREDENTIALS_FILE": "credentials_file",
    "GOOGLE_TOKEN_FILE": "token_file",
    "TIMEZONE": "timezone",
    "LOG_LEVEL": "log_level",
}


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``SPREADSHEET_ID`` is missing or whitespace-only, or
            if ``TRIGGER_PHASES`` is set but lists no phase.
    """
    load_dotenv()

    spreadsheet_id = os.environ.get("SPREADSHEET_ID", "").strip()
    if not spreadsheet_id:
        raise ConfigError("Missing required environment variables: SPREADSHEET_ID")

    values: dict = {"spreadsheet_id": spreadsheet_id}

    # Optional settings with defaults handled by the dataclass.
    for env_var, field_name in _OPTIONAL.items():
        raw = os.environ.get(env_var, "").strip()
        if raw:
            values[field_name] = raw

    raw_phases = os.environ.get("TRIGGER_PHASES")
    if raw_phases is not None and raw_phases.strip():
        phases = tuple(p.strip() for p in raw_phases.split(",") if p.strip())
        if not phases:
            raise ConfigError("TRIGGER_PHASES must list at least one phase")
        values["trigger_phases"] = phases

    return Settings(**values)
