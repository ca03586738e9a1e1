"""Google credentials for the Calendar and Sheets APIs.

Two kinds of key file are accepted at ``credentials_path``:

- a **service-account key** (``"type": "service_account"``), loaded
  directly; share the spreadsheet and calendar with the account's email;
- an **OAuth client secrets** file for a desktop app, which goes through
  the cached token -> refresh -> browser flow of ``google-auth-oauthlib``.

Usage::

    from gss_calendar.auth import get_credentials

    creds = get_credentials(Path("credentials.json"), Path("token.json"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from google.auth.credentials import Credentials
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials as UserCredentials
from google_auth_oauthlib.flow import InstalledAppFlow

from gss_calendar.exceptions import AuthError

logger = logging.getLogger(__name__)

SCOPES: list[str] = [
    "https://www.googleapis.com/auth/calendar",
    "https://www.googleapis.com/auth/spreadsheets",
]
"""Calendar read/write plus spreadsheet read/write."""


def get_credentials(
    credentials_path: Path | str,
    token_path: Path | str,
) -> Credentials:
    """Obtain credentials valid for both Calendar and Sheets.

    Args:
        credentials_path: Service-account key or OAuth client secrets file.
        token_path: Where the OAuth user token is cached (unused for
            service accounts).

    Returns:
        Credentials carrying :data:`SCOPES`.

    Raises:
        AuthError: If the key file is missing or unreadable.
    """
    credentials_path = Path(credentials_path)
    token_path = Path(token_path)

    if not credentials_path.exists():
        raise AuthError(f"Credentials file not found: {credentials_path}")

    try:
        info = json.loads(credentials_path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise AuthError(f"Cannot read credentials file {credentials_path}: {exc}") from exc

    if info.get("type") == "service_account":
        logger.info("Using service account %s", info.get("client_email", "?"))
        try:
            return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        except ValueError as exc:
            raise AuthError(f"Invalid service-account key: {exc}") from exc

    return _user_credentials(credentials_path, token_path)


# ---------------------------------------------------------------------------
# OAuth user flow
# ---------------------------------------------------------------------------


def _user_credentials(credentials_path: Path, token_path: Path) -> Credentials:
    creds = _load_cached_token(token_path)

    if creds is not None and creds.valid:
        logger.debug("Using cached token from %s", token_path)
        return creds

    if creds is not None and creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
        except GoogleAuthError as exc:
            logger.warning("Token refresh failed, falling back to browser flow: %s", exc)
        else:
            _save_token(creds, token_path)
            logger.info("Token refreshed")
            return creds

    logger.info("Starting browser-based OAuth flow")
    flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), scopes=SCOPES)
    creds = flow.run_local_server(port=0)
    _save_token(creds, token_path)
    return creds


def _load_cached_token(token_path: Path) -> UserCredentials | None:
    if not token_path.exists():
        return None
    try:
        return UserCredentials.from_authorized_user_file(str(token_path), SCOPES)
    except (json.JSONDecodeError, ValueError, KeyError) as exc:
        logger.warning("Ignoring unreadable token at %s: %s", token_path, exc)
        return None


def _save_token(creds: UserCredentials, token_path: Path) -> None:
    token_path.parent.mkdir(parents=True, exist_ok=True)
    token_path.write_text(creds.to_json())
    logger.info("Token saved to %s", token_path)
