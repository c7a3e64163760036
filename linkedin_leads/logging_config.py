"""
Logging setup shared by the dedupe and scrape commands.

Everything under the ``linkedin_leads`` logger goes to stdout with a
timestamp. The level comes from ``LEADS_LOG_LEVEL`` unless a caller passes
one explicitly.
"""

import logging
import sys

from linkedin_leads import config

APP_LOGGER = "linkedin_leads"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log a lot at INFO while a browser session or workbook is open
QUIET_LOGGERS = ("playwright", "asyncio", "urllib3", "openpyxl")


def resolve_level(level: int | str | None) -> int:
    """Turn a level number or name (case-insensitive) into a logging level."""
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """Configure the application logger and return it.

    Safe to call more than once: the stdout handler is added only on the
    first call, later calls just update the level.
    """
    level = resolve_level(level)
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level)

    if not any(getattr(h, "_leads_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._leads_handler = True
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logger
