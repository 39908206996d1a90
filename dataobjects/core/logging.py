"""Logging setup shared by entry points."""

import logging

from dataobjects.core.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings.

    Library modules only create module loggers; entry points call this once.
    """
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=settings.log_format)
