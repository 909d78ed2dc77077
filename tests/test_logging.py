"""Tests for devreport.logging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from devreport.logging import configure_logging, get_logger


@pytest.fixture
def restore_devreport_logger():
    logger = logging.getLogger("devreport")
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


def test_get_logger_nests_under_devreport() -> None:
    assert get_logger().name == "devreport"
    assert get_logger("scanner").name == "devreport.scanner"


def test_configure_logging_is_idempotent(restore_devreport_logger) -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger is restore_devreport_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_configure_logging_writes_log_file(tmp_path: Path, restore_devreport_logger) -> None:
    log_file = tmp_path / "devreport.log"

    configure_logging(log_file=log_file)
    get_logger("orchestrator").warning("Failed to run eslint: not found")
    for handler in restore_devreport_logger.handlers:
        handler.flush()

    assert "Failed to run eslint: not found" in log_file.read_text(encoding="utf-8")


def test_verbose_console_tags_component(restore_devreport_logger) -> None:
    logger = configure_logging(verbose=True)
    console = logger.handlers[0]
    record = logging.LogRecord(
        "devreport.collectors.lint", logging.WARNING, __file__, 1, "Failed to parse ESLint output", None, None
    )

    assert console.filter(record)
    assert console.format(record) == "[devreport:collectors.lint] WARNING Failed to parse ESLint output"


def test_default_console_format_is_plain(restore_devreport_logger) -> None:
    console = configure_logging().handlers[0]
    record = logging.LogRecord("devreport", logging.INFO, __file__, 1, "Clipboard copy disabled", None, None)

    assert console.filter(record)
    assert console.format(record) == "[devreport] INFO Clipboard copy disabled"


def test_configure_logging_creates_log_directory(tmp_path: Path, restore_devreport_logger) -> None:
    log_file = tmp_path / "logs" / "run.log"

    configure_logging(log_file=log_file)

    assert log_file.parent.is_dir()
