# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    RepositoryProvider,
    TaskProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (AuthProvider, TaskProvider) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        TaskProvider.register(self)


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
