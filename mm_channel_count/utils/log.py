"""Logging setup for the CLI."""

import logging
import sys

LOGGER_NAME = "mm_channel_count"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Debug and info lines go to stdout, warnings and errors to stderr. Calling
    this again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    out = logging.StreamHandler(sys.stdout)
    out.setLevel(logging.DEBUG)
    out.addFilter(_BelowWarning())
    out.setFormatter(formatter)

    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    err.setFormatter(formatter)

    logger.addHandler(out)
    logger.addHandler(err)
    return logger
