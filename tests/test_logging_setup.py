"""
Tests for structured JSON logging.
"""
import json
import logging
import sys

import pytest

from signaldesk.logging_setup import JSONFormatter, configure_logging


@pytest.fixture
def signaldesk_logger():
    logger = logging.getLogger("signaldesk")
    handlers, level = list(logger.handlers), logger.level
    logger.handlers[:] = []
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("signaldesk.sources.loader", logging.INFO, __file__, 1, "Loaded %d decisions", (3,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "signaldesk.sources.loader"
        assert entry["message"] == "Loaded 3 decisions"
        assert "timestamp" in entry

    def test_known_extras_copied(self):
        entry = json.loads(JSONFormatter().format(_record(source_name="v_production_decisions", row_count=3, is_demo=False)))
        assert entry["source_name"] == "v_production_decisions"
        assert entry["row_count"] == 3
        assert entry["is_demo"] is False

    def test_unknown_extras_ignored(self):
        entry = json.loads(JSONFormatter().format(_record(secret="x")))
        assert "secret" not in entry

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("signaldesk", logging.ERROR, __file__, 1, "failed", (), None)
            record.exc_info = sys.exc_info()
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestConfigureLogging:

    def test_single_handler(self, signaldesk_logger):
        configure_logging("DEBUG")
        configure_logging("DEBUG")
        assert len(signaldesk_logger.handlers) == 1
        assert signaldesk_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, signaldesk_logger):
        configure_logging("chatty")
        assert signaldesk_logger.level == logging.INFO
