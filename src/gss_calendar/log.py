"""Logging setup for gss-calendar.

Each run syncs one schedule row, so every record carries the row being
synced.  :func:`row_context` marks the row for the duration of a sync and
:class:`RowFilter` copies it onto each record as ``%(row)s`` (``-`` outside
a sync).  The format is pipe-separated with ISO 8601 timestamps::

    2024-04-10T10:00:00 | INFO     | row 5 | gss_calendar.sync | ...
"""

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Iterator
from contextvars import ContextVar

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | row %(row)s | %(name)s | %(message)s"

# Marks the handler installed by setup_logging so that repeated calls do
# not stack handlers or touch handlers installed by someone else.
_HANDLER_ATTR = "_gss_calendar_log_handler"

_current_row: ContextVar[int | None] = ContextVar("gss_calendar_row", default=None)


class RowFilter(logging.Filter):
    """Attach the row currently being synced to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        row = _current_row.get()
        record.row = "-" if row is None else row
        return True


@contextlib.contextmanager
def row_context(row: int) -> Iterator[None]:
    """Tag log records emitted inside the block with *row*."""
    token = _current_row.set(row)
    try:
        yield
    finally:
        _current_row.reset(token)


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with the project formatter.

    Safe to call more than once; a second call only adjusts the level.

    Args:
        level: A standard logging level name such as ``"DEBUG"``.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.addFilter(RowFilter())
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
