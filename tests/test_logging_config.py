# Area: Shared Tests
"""Tests for logging setup."""

import json
import logging

import pytest
from xox_coordinator._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def pkg_logger():
    """Package logger, restored after the test."""
    logger = logging.getLogger("xox_coordinator")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def make_record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("xox_coordinator.test", level, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(make_record(session_id=3)))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "xox_coordinator.test"
        assert data["session_id"] == 3

    def test_terminal_formatter_restores_levelname(self):
        record = make_record()
        output = TerminalFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[32m" in output
        assert record.levelname == "INFO"


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_terminal_and_file_handlers(self, pkg_logger, tmp_path):
        log_file = tmp_path / "logs" / "xox.log"
        setup_logging(str(log_file), "DEBUG")
        assert pkg_logger.level == logging.DEBUG
        assert len(pkg_logger.handlers) == 2
        assert pkg_logger.propagate is False

        logging.getLogger("xox_coordinator.test").info("written")
        for handler in pkg_logger.handlers:
            handler.flush()
        line = log_file.read_text().splitlines()[-1]
        assert json.loads(line)["message"] == "written"

    def test_no_file_handler(self, pkg_logger):
        setup_logging("", logging.WARNING)
        assert len(pkg_logger.handlers) == 1

    def test_repeat_setup_replaces_handlers(self, pkg_logger):
        setup_logging("")
        setup_logging("")
        assert len(pkg_logger.handlers) == 1

    def test_resolve_level(self):
        assert resolve_level("warning") == logging.WARNING
        assert resolve_level(logging.ERROR) == logging.ERROR
        with pytest.raises(ValueError):
            resolve_level("LOUD")
