"""
Tests for src/utils/logging.py
"""

import json
import logging

import structlog

from src.utils.logging import configure_logging, get_logger


def test_configure_logging_sets_level():
    """Test that the requested level reaches the root logger."""
    configure_logging(level="warning")
    assert logging.getLogger().level == logging.WARNING

    configure_logging(level="DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    structlog.reset_defaults()


def test_json_output(caplog):
    """Test that JSON rendering hands stdlib one parseable message per event."""
    configure_logging(level="INFO", json_output=True)

    with caplog.at_level(logging.INFO):
        get_logger("tests.logging").info("parsed_literal", text="0x1F", value=31)

    event = json.loads(caplog.records[-1].getMessage())
    assert event["event"] == "parsed_literal"
    assert event["value"] == 31
    assert event["level"] == "info"
    assert event["logger"] == "tests.logging"
    structlog.reset_defaults()
