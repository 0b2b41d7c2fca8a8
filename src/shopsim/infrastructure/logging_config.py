"""Configure diagnostic logging for the ``shopsim`` package.

Diagnostics go to stderr so they never interleave with the prompts and
tables written to stdout.  The order audit trail (``orders.log``) is a
separate concern handled by ``FileOrderLog``.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "shopsim"
HANDLER_NAME = "shopsim-stderr"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Install a single stderr handler on the package logger.

    Calling it again replaces the handler rather than adding another.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    return logger
