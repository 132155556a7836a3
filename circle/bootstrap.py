"""Process start-up: logging, observability and the DI container."""

import sys

import logfire
from dishka import AsyncContainer

from circle.config import Settings
from circle.util.di.container import create_container
from circle.util.logging import setup_logging
from circle.util.observability import configure_logfire


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and Logfire, then build the production container.

    The same ``Settings`` drive logging, Logfire and every provider in the
    container.

    Args:
        settings: Application settings (loaded from environment if omitted)

    Returns:
        Production DI container

    Raises:
        ConfigurationError: If the observability settings are inconsistent
    """
    settings = settings or Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        container = create_container(settings=settings)
    except Exception as e:
        logfire.error(
            "Container construction failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Circle core ready", environment=settings.environment)
    return container
