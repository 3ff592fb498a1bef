"""Structured Logging: JSONFormatter output and setup_logging behavior."""

import json
import logging
import sys

import pytest

from app.infrastructure.observability import (
    HANDLER_NAME,
    JSONFormatter,
    request_fields,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.makeLogRecord({
        "name": "app.api.routes.person",
        "levelname": "WARNING",
        "levelno": logging.WARNING,
        "msg": "Validation failed: %s",
        "args": ("Invalid age",),
    })
    record.__dict__.update(extra)
    return record


def test_json_formatter_emits_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "app.api.routes.person"
    assert log["message"] == "Validation failed: Invalid age"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(person_name="Bob", age=0, error_code="VALIDATION_ERROR"),
    ))
    assert log["person_name"] == "Bob"
    assert log["age"] == 0
    assert log["error_code"] == "VALIDATION_ERROR"


def test_json_formatter_stamps_service_and_event_time():
    record = _record()
    record.created = 0.0
    log = json.loads(JSONFormatter(service="greeter").format(record))
    assert log["service"] == "greeter"
    assert log["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_json_formatter_serializes_non_json_extras():
    log = json.loads(JSONFormatter().format(_record(resource_id=object())))
    assert log["resource_id"].startswith("<object object")


def test_request_fields_only_returns_set_extras():
    record = _record(resource_id="123", person_name=None)
    assert request_fields(record) == {"resource_id": "123"}


def test_json_formatter_skips_missing_and_unknown_extras():
    log = json.loads(JSONFormatter().format(_record(unrelated="x")))
    assert "resource_id" not in log
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert not isinstance(ours[0].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_setup_logging_falls_back_to_info(restore_root_logger):
    setup_logging("not-a-level", "json")
    assert logging.root.level == logging.INFO
