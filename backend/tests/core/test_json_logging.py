"""Structured Logging - JSON records carry extra fields; setup never stacks handlers."""

import json
import logging

from mediashelf.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("mediashelf.test", logging.WARNING, __file__, 1, "hello %s", ("x",), None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_known_extras():
    payload = json.loads(JSONFormatter().format(_record(tmdb_id=603, provider="tmdb", other=1)))
    assert payload["message"] == "hello x"
    assert payload["level"] == "WARNING"
    assert payload["tmdb_id"] == 603
    assert payload["provider"] == "tmdb"
    assert "other" not in payload


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "mediashelf"]
    assert len(named) == 1
    assert isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
