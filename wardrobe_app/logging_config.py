"""JSON logging for the wardrobe service.

Every log line is one JSON object. Events emitted through :func:`log_event`
carry an ``event`` name, the request's correlation id and any extra fields,
scrubbed so that user ids, image links and free-text outfit notes never reach
the log stream.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import re
import uuid
from typing import Any, Dict, Iterator, Optional

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord already has; extra fields may not reuse them.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Wardrobe fields that identify a user or point at their photos and notes.
REDACTED_FIELDS = frozenset({"user_id", "image_url", "brand", "description"})
REDACTED = "[redacted]"
_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+")


class JsonFormatter(logging.Formatter):
    """Render a record as a JSON object with its correlation id and extras."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in vars(record).items():
            if key in _RECORD_ATTRIBUTES or key in payload:
                continue
            payload[key] = redact_for_log(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str = "INFO") -> None:
    """Send every logger's output through a single JSON stream handler."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


def redact_for_log(value: Any) -> Any:
    """Return ``value`` with user identifiers and photo links masked.

    Clothing items and suggestions are reduced to their ids so that a log line
    never repeats a user's catalogue.
    """

    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if value.lower().startswith(("http://", "https://")):
            return "[redacted-url]"
        return _EMAIL_PATTERN.sub("[redacted-email]", value)
    if isinstance(value, dict):
        return {key: REDACTED if key in REDACTED_FIELDS else redact_for_log(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_for_log(item) for item in value]
    for attribute in ("suggestion_id", "item_id"):
        if hasattr(value, attribute):
            return getattr(value, attribute)
    return str(value)


def current_correlation_id() -> str:
    """Return the active correlation id, assigning a fresh one when unset."""

    correlation_id = CORRELATION_ID.get()
    if correlation_id is None:
        correlation_id = uuid.uuid4().hex
        CORRELATION_ID.set(correlation_id)
    return correlation_id


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id to a block, reusing the active one by default."""

    token = CORRELATION_ID.set(correlation_id or current_correlation_id())
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with ``fields`` attached as redacted record extras.

    Field names that collide with LogRecord attributes (``name``, ``module``
    and so on) get a trailing underscore.
    """

    exc_info = fields.pop("exc_info", None)
    extra: Dict[str, Any] = {"event": event, "correlation_id": current_correlation_id()}
    for key, value in fields.items():
        safe_key = f"{key}_" if key in _RECORD_ATTRIBUTES else key
        extra[safe_key] = REDACTED if key in REDACTED_FIELDS else redact_for_log(value)
    logger.log(level, event, exc_info=exc_info, extra=extra)


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "current_correlation_id",
    "log_event",
    "redact_for_log",
]
