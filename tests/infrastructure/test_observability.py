"""Structured Logging — JSON formatter and setup."""

import json
import logging
import sys

from user_api.infrastructure.observability import (
    EXTRA_FIELDS, JSONFormatter, setup_logging,
)


def _record(**extra):
    record = logging.LogRecord(
        "user_api.core.user_store", logging.INFO, __file__, 1,
        "User created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "user_api.core.user_store"
    assert log["message"] == "User created"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(_record(user_id=3, unrelated="x")))
    assert log["user_id"] == 3
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in log["exception"]


def test_setup_logging_replaces_own_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    original_level = root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert not isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = before
        root.setLevel(original_level)


def test_extra_fields_are_the_ones_the_app_logs():
    assert EXTRA_FIELDS == ("user_id", "error_code", "path")
