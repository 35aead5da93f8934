"""Log formatters for the client's request and fault records.

The client tags its records with the API's ``meta.requestId`` and, for
faults, the ``errorType`` and HTTP status. Both formatters surface those
tags; nothing else is lifted from the record.
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

# Record attributes set through ``extra=`` by foursquare.client.
CONTEXT_FIELDS = ("request_id", "error_type", "status_code")


def _utc(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _traceback(record: logging.LogRecord) -> str | None:
    if record.exc_info and record.exc_info[0] is not None:
        return "".join(traceback.format_exception(*record.exc_info))
    return None


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": _utc(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value

        exception = _traceback(record)
        if exception:
            entry["exception"] = exception
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``2017-08-01 12:00:00 WARNING  [59a4...] foursquare.client - message``"""

    def format(self, record: logging.LogRecord) -> str:
        request_id = getattr(record, "request_id", None)
        prefix = f"[{request_id}] " if request_id else ""
        line = (
            f"{_utc(record):%Y-%m-%d %H:%M:%S} {record.levelname:<8} "
            f"{prefix}{record.name} - {record.getMessage()}"
        )
        exception = _traceback(record)
        if exception:
            line += "\n" + exception
        return line


def setup_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """Route all records to stderr through a single formatter.

    *log_format* is ``"json"`` or ``"text"``; repeated calls replace the
    previous handler.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())
    root.addHandler(handler)
