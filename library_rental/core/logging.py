"""Logging setup for the rental service."""

import logging
from typing import Optional

from library_rental.core.config import Settings, settings as default_settings


PACKAGE_LOGGER = "library_rental"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once replaces the handler instead of stacking
    duplicates, so log lines are never emitted twice.

    Args:
        settings: Settings to read LOG_LEVEL and LOG_FORMAT from

    Returns:
        The configured package logger
    """
    settings = settings or default_settings

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    logger.addHandler(handler)

    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper()
    logger.setLevel(level)
    return logger
