"""Tests for logging setup."""

import logging

import pytest

from timeboard.logging_setup import (
    FILE_HANDLER_NAME,
    STREAM_HANDLER_NAME,
    setup_logging,
)


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("timeboard")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    for handler in saved_handlers:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


def _names(logger: logging.Logger) -> list[str]:
    return sorted(h.get_name() for h in logger.handlers)


def test_installs_file_and_stream_handlers(clean_logger, tmp_path):
    log_file = tmp_path / "logs" / "timeboard.log"
    setup_logging(log_file=log_file)
    assert _names(clean_logger) == [FILE_HANDLER_NAME, STREAM_HANDLER_NAME]
    assert log_file.parent.is_dir()
    assert clean_logger.level == logging.INFO


def test_repeated_setup_does_not_stack_handlers(clean_logger, tmp_path):
    log_file = tmp_path / "timeboard.log"
    setup_logging(log_file=log_file)
    setup_logging(log_file=log_file)
    setup_logging(log_file=log_file)
    assert len(clean_logger.handlers) == 2


def test_second_call_updates_levels(clean_logger, tmp_path):
    log_file = tmp_path / "timeboard.log"
    setup_logging(log_file=log_file)
    setup_logging(debug=True, log_file=log_file)
    stream = next(h for h in clean_logger.handlers if h.get_name() == STREAM_HANDLER_NAME)
    assert clean_logger.level == logging.DEBUG
    assert stream.level == logging.DEBUG

    setup_logging(log_file=log_file)
    assert stream.level == logging.WARNING


def test_file_handler_writes(clean_logger, tmp_path):
    log_file = tmp_path / "timeboard.log"
    setup_logging(log_file=log_file)
    logging.getLogger("timeboard.drag").info("hello from a test")
    for handler in clean_logger.handlers:
        handler.flush()
    assert "hello from a test" in log_file.read_text(encoding="utf-8")
