# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    NetworkProvider,
    RepositoryProvider,
)
from ..domain.repositories.network_repository import NetworkRepository


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (NetworkProvider) - depend on repositories
    
    When a repository is passed in, it is used as-is and no database
    connection is registered.
    """
    
    def __init__(self, network_repository: Optional[NetworkRepository] = None) -> None:
        super().__init__()
        if network_repository is not None:
            self.register_singleton(NetworkRepository, network_repository)
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        if not self.has(NetworkRepository):
            # Step 1: Register database connections (foundation)
            DatabaseProvider.register(self)
            
            # Step 2: Register repositories (depends on database)
            RepositoryProvider.register(self)
        
        # Step 3: Register services (depends on repositories)
        NetworkProvider.register(self)


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
