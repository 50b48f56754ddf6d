"""Logging configuration for the GitHub API client."""

import logging
import sys
from typing import Optional


PACKAGE_LOGGER = "github_api_async"

# Log level constants
DEFAULT_LOG_LEVEL = logging.INFO
DEBUG_LOG_LEVEL = logging.DEBUG

# Library default: emit nothing unless the application configures handlers
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    log_level: Optional[int] = None,
    log_file: Optional[str] = None,
    debug: bool = False
) -> logging.Logger:
    """
    Configure logging for applications embedding the client.

    Request logs go to stderr, or to a file when one is given. Pair
    ``debug=True`` with ``Config.debug`` to see per-request status and
    rate limit lines.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to instead of stderr
        debug: Shortcut for ``log_level=logging.DEBUG``

    Returns:
        The package logger
    """
    if log_level is None:
        log_level = DEBUG_LOG_LEVEL if debug else DEFAULT_LOG_LEVEL

    # Create formatter with detailed information
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    # Drop handlers from a previous call, keep the NullHandler
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    if log_file:
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    # Set transport loggers to WARNING to minimize noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__ from module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
