"""
Request-scoped correlation for log records.

- `request_id_var` holds the id of the request currently being served; the
  middleware sets it, everything else only reads it.
- `RequestIDFilter` copies that id onto each `LogRecord` so a formatter using
  `%(request_id)s` works for every logger, including management commands where
  the value falls back to `"-"`.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIDFilter(logging.Filter):
    """Attach `record.request_id` unless the caller already passed one via `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        return True
