"""Structured Logging — JSON formatter fields and setup idempotence."""

import json
import logging

import pytest

from user_api.infrastructure.observability import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "user_api.test", logging.WARNING, __file__, 1, "User %s deleted", (7,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "user_api.test"
    assert log["message"] == "User 7 deleted"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras_when_present():
    log = json.loads(JSONFormatter().format(
        _record(user_id=7, error_code="OBJECT_NOT_FOUND", path="/user/7"),
    ))
    assert log["user_id"] == 7
    assert log["error_code"] == "OBJECT_NOT_FOUND"
    assert log["path"] == "/user/7"
    assert "operation" not in log


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")
    named = [h for h in logging.root.handlers if h.get_name() == "user_api"]
    assert len(named) == 1
    assert not isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("nonsense", "json")
    assert logging.root.level == logging.INFO
