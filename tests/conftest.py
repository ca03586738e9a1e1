"""Shared fixtures for gss-calendar tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

_ENV_VARS = (
    "SPREADSHEET_ID",
    "SHEET_NAME",
    "CALENDAR_ID",
    "GOOGLE_CREDENTIALS_FILE",
    "GOOGLE_TOKEN_FILE",
    "TIMEZONE",
    "LOG_LEVEL",
    "TRIGGER_PHASES",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all gss-calendar environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("gss_calendar.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def monkeypatch_env(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set the required environment variables to valid defaults.

    Returns the dict of variables so tests can inspect or override values.
    """
    env_vars = {"SPREADSHEET_ID": "sheet-abc123"}
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
