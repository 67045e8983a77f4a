"""Structured Logging — verifies JSON output and known extra fields."""

import json
import logging

from wallride.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "wallride.test", logging.WARNING, __file__, 1, "Invalid value", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras():
    payload = json.loads(JSONFormatter().format(
        _record(field_id=3, error_code="INVALID_VALUE", unrelated="x"),
    ))
    assert payload["level"] == "WARNING"
    assert payload["message"] == "Invalid value"
    assert payload["field_id"] == 3
    assert payload["error_code"] == "INVALID_VALUE"
    assert "unrelated" not in payload


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging("DEBUG", "text")
        setup_logging("DEBUG", "json")
        ours = [h for h in root.handlers if h.get_name() == "wallride"]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        for handler in [h for h in root.handlers if h.get_name() == "wallride"]:
            root.removeHandler(handler)
        root.setLevel(previous_level)
