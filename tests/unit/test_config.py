"""Tests for gss-calendar configuration loading."""

from __future__ import annotations

import dataclasses

import pytest

from gss_calendar.config import (
    DEFAULT_TRIGGER_PHASES,
    ColumnMap,
    ConfigError,
    SyncConfig,
    load_settings,
)


class TestLoadSettingsHappyPath:
    """Tests for successful configuration loading."""

    def test_load_settings_with_required_var(self, monkeypatch_env: dict[str, str]) -> None:
        """SPREADSHEET_ID alone yields settings with defaults."""
        settings = load_settings()

        assert settings.spreadsheet_id == "sheet-abc123"
        assert settings.sheet_name == "kokochan"
        assert settings.calendar_id == "primary"
        assert settings.timezone == "Asia/Tokyo"
        assert settings.log_level == "INFO"
        assert settings.trigger_phases == DEFAULT_TRIGGER_PHASES

    def test_load_settings_optional_overrides(
        self, monkeypatch_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Optional variables are honoured."""
        monkeypatch.setenv("SHEET_NAME", "2025")
        monkeypatch.setenv("CALENDAR_ID", "jobs@group.calendar.google.com")
        monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("GOOGLE_CREDENTIALS_FILE", "sa.json")

        settings = load_settings()

        assert settings.sheet_name == "2025"
        assert settings.calendar_id == "jobs@group.calendar.google.com"
        assert settings.timezone == "Europe/Berlin"
        assert settings.log_level == "DEBUG"
        assert settings.credentials_file == "sa.json"

    def test_trigger_phases_override(
        self, monkeypatch_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """TRIGGER_PHASES is split on commas and stripped."""
        monkeypatch.setenv("TRIGGER_PHASES", "ES, 1st interview ,final")

        settings = load_settings()

        assert settings.trigger_phases == ("ES", "1st interview", "final")

    def test_sync_config_from_settings(
        self, monkeypatch_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """sync_config() carries sheet, calendar and phases."""
        monkeypatch.setenv("TRIGGER_PHASES", "ES")
        monkeypatch.setenv("CALENDAR_ID", "cal-1")

        config = load_settings().sync_config()

        assert config.trigger_phases == frozenset({"ES"})
        assert config.calendar_id == "cal-1"
        assert config.sheet_name == "kokochan"
        assert config.reminder_minutes == 60


class TestLoadSettingsErrors:
    """Tests for missing or invalid environment variables."""

    def test_missing_spreadsheet_id(self, clean_env: None) -> None:
        """Missing SPREADSHEET_ID raises ConfigError naming the variable."""
        with pytest.raises(ConfigError, match="SPREADSHEET_ID"):
            load_settings()

    def test_whitespace_spreadsheet_id(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Whitespace-only SPREADSHEET_ID counts as missing."""
        monkeypatch.setenv("SPREADSHEET_ID", "   ")

        with pytest.raises(ConfigError, match="SPREADSHEET_ID"):
            load_settings()

    def test_trigger_phases_only_commas(
        self, monkeypatch_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """TRIGGER_PHASES listing nothing is rejected."""
        monkeypatch.setenv("TRIGGER_PHASES", " , ,")

        with pytest.raises(ConfigError, match="TRIGGER_PHASES"):
            load_settings()


class TestColumnMap:
    """Tests for column role validation."""

    def test_defaults_match_schedule_sheet(self) -> None:
        columns = ColumnMap()

        assert columns.company == 2
        assert columns.event_id == 12
        assert columns.prev_status == 13
        assert columns.max_column == 13

    def test_duplicate_columns_rejected(self) -> None:
        with pytest.raises(ConfigError, match="share"):
            ColumnMap(start=2)

    def test_non_positive_column_rejected(self) -> None:
        with pytest.raises(ConfigError, match="positive"):
            ColumnMap(company=0)


class TestSyncConfig:
    """SyncConfig is immutable."""

    def test_sync_config_is_frozen(self) -> None:
        config = SyncConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.calendar_id = "other"  # type: ignore[misc]
