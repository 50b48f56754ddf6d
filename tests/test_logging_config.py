"""Tests for the logging setup helper."""

import logging

import pytest

from github_api_async.utils.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture
def package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


def test_library_installs_null_handler(package_logger):
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_setup_logging_defaults_to_info(package_logger):
    logger = setup_logging()

    assert logger is package_logger
    assert logger.level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING


def test_setup_logging_debug(package_logger):
    assert setup_logging(debug=True).level == logging.DEBUG


def test_setup_logging_replaces_previous_handlers(package_logger):
    setup_logging()
    setup_logging()

    stream_handlers = [
        h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)
    ]
    assert len(stream_handlers) == 1


def test_setup_logging_to_file(package_logger, tmp_path):
    log_file = tmp_path / "github.log"

    setup_logging(log_file=str(log_file))
    get_logger("github_api_async.github.client").info("GET /user")
    for handler in package_logger.handlers:
        handler.flush()

    assert "github_api_async.github.client - INFO - GET /user" in log_file.read_text()
