"""Structured Logging: one stdout handler for the service, JSON or text.

Invariants:
    - JSON lines carry timestamp, level, logger, message
    - Timestamps use the same format as error envelopes (ms precision, Z suffix)
    - Only whitelisted extras are emitted; anything else on the record is dropped
    - At most one handler named "models-api" is attached to the root logger

Design Decisions:
    - Extras are a formatter argument so callers can widen them without subclassing
    - Text format appends the model id when a record carries one
"""

import json
import logging
from datetime import datetime, timezone
from typing import Iterable

from app.core.errors import format_timestamp

HANDLER_NAME = "models-api"
DEFAULT_EXTRAS = ("model_id", "path", "error_code", "status", "count")

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, extras: Iterable[str] = DEFAULT_EXTRAS):
        super().__init__()
        self.extras = tuple(extras)

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log = {
            "timestamp": format_timestamp(created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in self.extras
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(_TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        model_id = getattr(record, "model_id", None)
        return line if model_id is None else f"{line} [model_id={model_id}]"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach the service handler to the root logger, replacing an earlier one."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
