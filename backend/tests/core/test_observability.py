"""Structured Logging: JSON/text formatters and idempotent setup."""

import json
import logging

from app.infrastructure.observability import (
    HANDLER_NAME,
    JSONFormatter,
    TextFormatter,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.test"
    assert log["message"] == "hello world"


def test_json_timestamp_matches_envelope_format():
    record = _record()
    record.created = 0.25

    log = json.loads(JSONFormatter().format(record))

    assert log["timestamp"] == "1970-01-01T00:00:00.250Z"


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(_record(model_id=3, other="x")))
    assert log["model_id"] == 3
    assert "other" not in log


def test_json_formatter_custom_extras():
    log = json.loads(
        JSONFormatter(extras=("other",)).format(_record(model_id=3, other="x")),
    )
    assert log["other"] == "x"
    assert "model_id" not in log


def test_text_formatter_appends_model_id():
    assert TextFormatter().format(_record(model_id=7)).endswith(
        "hello world [model_id=7]",
    )
    assert TextFormatter().format(_record()).endswith("hello world")


def test_setup_logging_twice_installs_one_handler():
    setup_logging("DEBUG", "text")
    handler = setup_logging("DEBUG", "json")

    ours = [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]
    assert ours == [handler]
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG
