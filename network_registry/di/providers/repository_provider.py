from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.network_repository import NetworkRepository
from ...infrastructure.db.mongo_network_repository import MongoNetworkRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get("mongo_client")
        collection = mongo_client.get_collection(get_settings().networks_collection)
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            NetworkRepository,
            MongoNetworkRepository(collection)
        )
