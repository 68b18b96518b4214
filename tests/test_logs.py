"""Tests for waymark.logs module."""

import logging

import pytest

from waymark.config import Config, LoggingConfig
from waymark.logs import resolve_level, setup_logging


@pytest.fixture(autouse=True)
def reset_waymark_logger():
    """Detach handlers added by setup_logging after each test."""
    yield
    logger = logging.getLogger("waymark")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestResolveLevel:
    def test_known_levels(self):
        assert resolve_level("DEBUG") == logging.DEBUG
        assert resolve_level("info") == logging.INFO

    def test_unknown_level_falls_back(self):
        assert resolve_level("CHATTY") == logging.WARNING


class TestSetupLogging:
    def test_disabled_uses_null_handler(self):
        setup_logging(Config())
        handlers = logging.getLogger("waymark").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_writes_to_file(self, tmp_path):
        log_path = tmp_path / "logs" / "waymark.log"
        config = Config(logging=LoggingConfig(level="DEBUG", file=str(log_path)))
        setup_logging(config)

        logging.getLogger("waymark.history").debug("Visited %s", "a.com")
        for handler in logging.getLogger("waymark").handlers:
            handler.flush()

        assert "Visited a.com" in log_path.read_text()

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        config = Config(logging=LoggingConfig(file=str(tmp_path / "waymark.log")))
        setup_logging(config)
        setup_logging(config)
        assert len(logging.getLogger("waymark").handlers) == 1

    def test_level_applied(self):
        setup_logging(Config(logging=LoggingConfig(level="ERROR")))
        assert logging.getLogger("waymark").level == logging.ERROR
