"""Logging configuration for the SSH runner."""

import logging
import os
import sys

LOG_LEVEL_ENV = "SSH_RUNNER_LOG_LEVEL"


def setup_logger(
    name: str, level: str = "INFO", json_output: bool = False
) -> logging.Logger:
    """
    Set up logger with a single stream handler.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, log to stderr so JSON written to stdout stays parseable

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Replace handlers from a previous configuration
    logger.handlers.clear()
    logger.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler(sys.stderr if json_output else sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the ``ssh_runner`` namespace.

    Handlers live on the ``ssh_runner`` root logger configured by the CLI, so
    library code only asks for a child logger and never installs handlers.
    """
    return logging.getLogger(f"ssh_runner.{name}")


def resolve_log_level(log_level: str = None) -> str:
    """Pick the log level: explicit option > environment > INFO."""
    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    return log_level.upper()
