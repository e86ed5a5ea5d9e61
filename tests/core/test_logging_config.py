import json
import logging

import pytest

from src.core.logging_config import SERVICE_NAME, LttiJsonFormatter, setup_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = [h for h in root.handlers if not isinstance(h.formatter, LttiJsonFormatter)]
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def json_handlers(root):
    return [h for h in root.handlers if isinstance(h.formatter, LttiJsonFormatter)]

def test_setup_logging_is_idempotent(clean_root_logger):
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    assert len(json_handlers(clean_root_logger)) == 1
    assert clean_root_logger.level == logging.DEBUG

def test_second_call_changes_level(clean_root_logger):
    setup_logging("DEBUG")
    setup_logging("warning")
    assert len(json_handlers(clean_root_logger)) == 1
    assert clean_root_logger.level == logging.WARNING

def test_unknown_level_defaults_to_info(clean_root_logger):
    setup_logging("not-a-level")
    assert clean_root_logger.level == logging.INFO

def test_formatter_emits_json_fields():
    formatter = LttiJsonFormatter()
    record = logging.LogRecord("ltti.test", logging.WARNING, __file__, 12, "hello %s", ("world",), None)
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "hello world"
    assert payload["level"] == "WARNING"
    assert payload["name"] == "ltti.test"
    assert payload["service"] == SERVICE_NAME
    assert payload["location"] == f"{record.module}:12"
    assert "timestamp" in payload

def test_formatter_keeps_extra_fields():
    formatter = LttiJsonFormatter()
    record = logging.LogRecord("ltti.test", logging.INFO, __file__, 3, "scored", (), None)
    record.code = "SIRD"
    payload = json.loads(formatter.format(record))
    assert payload["code"] == "SIRD"
