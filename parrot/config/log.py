"""Logging setup for applications embedding the parrot package."""

import logging
from typing import Optional

from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    The library never calls this itself; importing parrot leaves the
    host application's logging alone.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format=settings.log_format,
        level=settings.log_level_value,
    )
    logging.getLogger("parrot").setLevel(settings.log_level_value)

    logger.info(
        "Logging configured",
        extra={"log_level": settings.log_level}
    )
