"""Logging setup.

All log output goes to stderr so stdout stays reserved for command payloads
that an orchestrating agent parses.
"""

import logging
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "learning_hour"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a rich stderr handler to the package logger.

    Safe to call more than once; the handler is only installed on the first
    call, later calls just adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            log_time_format="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
