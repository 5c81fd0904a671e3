"""
Partial Update Network Use Case
===============================

Business use case for patching some fields of a network (PATCH).
Unlike the full update, a patch may toggle `active`, which is the only way
to bring a deleted network back.
"""
import logging

from network_registry.application.use_cases.network.update_network import apply_network_update
from network_registry.domain.models.network import Network, NetworkId, UpdateNetworkData
from network_registry.domain.repositories.network_repository import NetworkRepository

logger = logging.getLogger(__name__)


class PartialUpdateNetworkUseCase:
    """Use case for a partial update of a network."""
    
    def __init__(self, network_repository: NetworkRepository):
        self._repository = network_repository
    
    async def execute(self, network_id: NetworkId, data: UpdateNetworkData) -> Network:
        """
        Execute the partial update network use case.
        
        An empty patch only refreshes `updated_at`.
        
        Args:
            network_id: Network identifier
            data: Fields to change; None fields are kept
            
        Returns:
            Updated network entity
        """
        logger.info("Partially updating network %s", network_id)
        return await apply_network_update(self._repository, network_id, data)
