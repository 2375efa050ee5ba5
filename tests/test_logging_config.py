"""Unit tests for structlog setup."""

from __future__ import annotations

import logging

import pytest
import structlog

from pagination_control.config import SERVICE_NAME
from pagination_control.utils.logging_config import add_service_name, setup_logging


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    structlog.reset_defaults()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestAddServiceName:

    def test_injects_service(self):
        event = add_service_name(None, "info", {"event": "x"})
        assert event["service"] == SERVICE_NAME

    def test_keeps_existing_service(self):
        event = add_service_name(None, "info", {"event": "x", "service": "other"})
        assert event["service"] == "other"


class TestSetupLogging:

    def test_sets_root_level_and_single_handler(self, restore_logging):
        setup_logging("DEBUG")
        assert restore_logging.level == logging.DEBUG
        assert len(restore_logging.handlers) == 1
        assert isinstance(restore_logging.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_logging):
        setup_logging("chatty")
        assert restore_logging.level == logging.INFO
