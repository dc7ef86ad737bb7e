"""Dependency injection container."""
from dependency_injector import containers, providers

from core.logger import LoggerService
from core.settings import Settings
from management import Management


class Container(containers.DeclarativeContainer):
    """Main application container."""

    # Settings
    settings = providers.Singleton(Settings)

    # Core services
    logger = providers.Singleton(LoggerService, settings_instance=settings)

    # HTTP transport override (None means httpx picks the network transport)
    transport = providers.Object(None)

    # Management API
    management = providers.Singleton(
        Management,
        settings=settings,
        logger=logger,
        transport=transport,
    )
    clients = management.provided.clients


container = Container()
