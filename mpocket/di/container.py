# Standard library imports
from typing import Any, Callable, Optional

# Local application imports
from mpocket.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    RecordProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (RecordProvider) - depend on repositories
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Optional[Callable[..., Any]] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        # Builds the MongoDB driver client; None means pymongo.MongoClient
        self.client_factory = client_factory
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        RecordProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace the global container (None resets it)."""
    global _container
    _container = container
