# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings
    2. Database connection (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depend on the connection
    4. Services (UserProvider) - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.setup(settings or get_settings())

    def setup(self, settings: Settings) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → database → repositories → services
        """
        self.register_singleton(Settings, settings)
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        UserProvider.register(self)


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
