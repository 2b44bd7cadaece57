"""
Tests for logging setup.
"""

import json
import logging

from bankapp.core.logging_config import setup_logging


def test_json_logging(capsys):
    logger = setup_logging("DEBUG", "json", logger_name="bankapp.test_json")
    logger.info("Transfer %s committed", 42)

    record = json.loads(capsys.readouterr().err.strip())
    assert record["level"] == "INFO"
    assert record["module"] == "bankapp.test_json"
    assert record["message"] == "Transfer 42 committed"


def test_json_logging_includes_exception(capsys):
    logger = setup_logging("INFO", "json", logger_name="bankapp.test_exc")
    try:
        raise RuntimeError("store unavailable")
    except RuntimeError:
        logger.exception("Atomic unit rolled back")

    record = json.loads(capsys.readouterr().err.strip())
    assert record["level"] == "ERROR"
    assert "RuntimeError: store unavailable" in record["exception"]


def test_setup_is_idempotent():
    setup_logging("INFO", "text", logger_name="bankapp.test_repeat")
    logger = setup_logging("WARNING", "text", logger_name="bankapp.test_repeat")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False
