"""Logging configuration for the application."""

import logging
import sys

from circle.config import Settings


def setup_logging(settings: Settings) -> int:
    """Configure stdlib logging for the process.

    Args:
        settings: Application settings

    Returns:
        The level applied to the ``circle`` loggers
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Dependency chatter stays at WARNING
    logging.getLogger("dishka").setLevel(logging.WARNING)
    logging.getLogger("opentelemetry").setLevel(logging.WARNING)

    logging.getLogger("circle").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
    return level
