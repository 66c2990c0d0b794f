"""Tests for logging setup."""

import json
import logging

from utils.log import JsonFormatter, get_logger, setup_logging


def test_loggers_are_namespaced():
    assert get_logger("pipeline").name == "blurhash.pipeline"


def test_setup_logging_replaces_handlers():
    root = setup_logging("debug")
    setup_logging("warning")
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_json_formatter_emits_one_object():
    record = logging.LogRecord("blurhash.test", logging.INFO, __file__, 1, "decoded %s", ("abc",), None)
    record.ctx = {"width": 32}
    entry = json.loads(JsonFormatter().format(record))
    assert entry["level"] == "INFO"
    assert entry["src"] == "blurhash.test"
    assert entry["msg"] == "decoded abc"
    assert entry["ctx"] == {"width": 32}
