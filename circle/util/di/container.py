"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container

from circle.config import Settings
from circle.util.di import PROVIDERS, get_provider


def create_container(
    *extra_providers: Provider, settings: Settings | None = None
) -> AsyncContainer:
    """Build the production container.

    Args:
        *extra_providers: Providers contributed by the host application,
            e.g. a web framework integration or a database-backed
            persistence component
        settings: Application settings (loaded from environment if omitted)

    Returns:
        Configured DI container with production providers
    """
    settings = settings or Settings()
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *providers, *extra_providers, context={Settings: settings}
    )
