"""Logging setup for the timespan command line tool.

Library modules only create loggers; handlers are installed here, on request.
"""

from __future__ import annotations

import logging
import sys
import time

from timespan.config import TimespanConfig

LOGGER_NAME = "timespan"


def configure_logging(config: TimespanConfig) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger."""
    fmt = logging.Formatter("%(asctime)sZ\t%(levelname)s\t%(message)s")
    fmt.converter = time.gmtime

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if config.log_file:
        fh = logging.FileHandler(config.log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
