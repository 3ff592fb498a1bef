"""Structured Logging: JSON formatter and setup for request lifecycle logs.

Invariants:
    - All logs include event timestamp (record.created), service, level, logger and message
    - Extra fields (person_name, age, resource_id, error_code...) surfaced when present
    - JSON format by default, human-readable when log_format is "text"

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging replaces its own handler, so run() and lifespan can both call it
    - person_name instead of name: LogRecord already owns the "name" attribute
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "hello-api"

EXTRA_FIELDS = (
    "person_name", "age", "resource_id", "name_length",
    "error_code", "path",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record: event time, origin, message, request fields."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        emitted_at = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": emitted_at.isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(request_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def request_fields(record: logging.LogRecord) -> dict:
    """Request fields attached through `extra=`, skipping the ones left unset."""
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


HANDLER_NAME = "hello_api"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application. Safe to call more than once."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
