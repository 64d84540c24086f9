"""Shared logger for the calculator package."""
import logging
import sys

LOGGER_NAME = "rpn_calculator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr handler to the package logger and set its level.

    Calling it again only updates the level, no duplicate handlers are added.

    :param int level: Logging level (e.g. logging.DEBUG)

    :return: The configured package logger
    :rtype: logging.Logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


logger: logging.Logger = logging.getLogger(LOGGER_NAME)
