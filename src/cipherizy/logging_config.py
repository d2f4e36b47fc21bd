"""Logging setup for applications embedding cipherizy."""

from __future__ import annotations

import logging
import sys

from cipherizy_config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> int:
    """Configure console logging for the cipherizy loggers.

    Sets up:
    - Console output with timestamps and module names
    - Log level from ``level`` or, when omitted, from settings
    - WARNING level for the crypto backend

    Returns the numeric level applied.
    """
    level_str = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("cipherizy").setLevel(log_level)
    logging.getLogger("cipherizy_config").setLevel(log_level)

    logging.getLogger("cryptography").setLevel(logging.WARNING)

    return log_level
