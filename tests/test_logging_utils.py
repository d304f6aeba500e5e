import json
import logging

from src.attendance_tracker.attendance_tracker.logging_utils import JsonFormatter, PlainFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("attendance_tracker.test", logging.INFO, __file__, 1, "attendance_recorded", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    payload = json.loads(JsonFormatter().format(_record(emp_id="E1", record_id=7)))

    assert payload["message"] == "attendance_recorded"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "attendance_tracker.test"
    assert payload["emp_id"] == "E1"
    assert payload["record_id"] == 7
    assert "lineno" not in payload


def test_plain_formatter_appends_context():
    line = PlainFormatter().format(_record(emp_id="E1"))

    assert line.endswith("attendance_recorded emp_id=E1")
