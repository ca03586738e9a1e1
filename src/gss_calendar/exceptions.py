"""Exceptions for Google API adapters.

Adapter methods are wrapped with :func:`translate_http_errors`, which
turns ``googleapiclient`` and network errors into the hierarchy below.
Nothing is retried: a failed call aborts the current row and the next edit
of that row tries again.

Exception hierarchy::

    GoogleServiceError           (base, carries the HTTP status)
    +-- AuthError                (credentials missing or unusable)
    +-- SheetsAPIError           (row storage failures)
    +-- CalendarAPIError         (calendar failures)
        +-- CalendarAuthError    (HTTP 401)
        +-- CalendarRateLimitError (HTTP 429)
        +-- CalendarNotFoundError  (HTTP 404 / 410)
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------


class GoogleServiceError(Exception):
    """Base exception for Google API failures.

    Attributes:
        status_code: HTTP status code from the API, or ``None`` if the
            error did not originate from an HTTP response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthError(GoogleServiceError):
    """Raised when Google credentials cannot be obtained."""

    def __init__(self, message: str = "Google authentication failed") -> None:
        super().__init__(message, status_code=401)


class SheetsAPIError(GoogleServiceError):
    """Raised when reading or writing the schedule sheet fails."""


class CalendarAPIError(GoogleServiceError):
    """Raised when a Google Calendar call fails."""


class CalendarAuthError(CalendarAPIError):
    """Raised on HTTP 401 from the Calendar API."""

    def __init__(self, message: str = "Calendar authentication failed") -> None:
        super().__init__(message, status_code=401)


class CalendarRateLimitError(CalendarAPIError):
    """Raised on HTTP 429 from the Calendar API."""

    def __init__(self, message: str = "Calendar API rate limit exceeded") -> None:
        super().__init__(message, status_code=429)


class CalendarNotFoundError(CalendarAPIError):
    """Raised when an event does not exist (HTTP 404) or was deleted (HTTP 410)."""

    def __init__(self, message: str = "Calendar resource not found", status_code: int = 404) -> None:
        super().__init__(message, status_code=status_code)


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------


def _classify_calendar_error(error: HttpError) -> CalendarAPIError:
    """Map an ``HttpError`` from the Calendar API to a calendar exception."""
    status = error.resp.status

    if status in (404, 410):
        return CalendarNotFoundError(str(error), status_code=status)
    if status == 429:
        return CalendarRateLimitError(str(error))
    if status == 401:
        return CalendarAuthError(str(error))
    return CalendarAPIError(str(error), status_code=status)


def _classify_sheets_error(error: HttpError) -> SheetsAPIError:
    return SheetsAPIError(str(error), status_code=error.resp.status)


_CLASSIFIERS: dict[str, Callable[[HttpError], GoogleServiceError]] = {
    "calendar": _classify_calendar_error,
    "sheets": _classify_sheets_error,
}

_NETWORK_ERRORS: dict[str, type[GoogleServiceError]] = {
    "calendar": CalendarAPIError,
    "sheets": SheetsAPIError,
}


def translate_http_errors(service: str) -> Callable[[F], F]:
    """Decorator that converts API and network errors for *service*.

    - ``HttpError`` is classified by status code (see the hierarchy above).
    - ``OSError`` / ``TimeoutError`` become the service's base exception
      with no status code.

    Args:
        service: ``"calendar"`` or ``"sheets"``.

    Raises:
        ValueError: If *service* is unknown.
    """
    if service not in _CLASSIFIERS:
        raise ValueError(f"Unknown Google service: {service!r}")
    classify = _CLASSIFIERS[service]
    network_error = _NETWORK_ERRORS[service]

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except HttpError as exc:
                error = classify(exc)
                logger.debug(
                    "%s API error in %s (HTTP %s): %s",
                    service,
                    func.__name__,
                    error.status_code,
                    exc,
                )
                raise error from exc
            except (OSError, TimeoutError) as exc:
                raise network_error(f"Network error: {exc}") from exc

        return wrapper  # type: ignore[return-value]

    return decorator
