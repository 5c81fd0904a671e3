"""
Get Network By Id Use Case
==========================

Use case for retrieving a single network, active or not.
"""
import logging

from network_registry.application.errors import NotFoundError, to_use_case_error
from network_registry.domain.exceptions import RepositoryError
from network_registry.domain.models.network import Network, NetworkId
from network_registry.domain.repositories.network_repository import NetworkRepository

logger = logging.getLogger(__name__)


class GetNetworkByIdUseCase:
    """Use case for getting a network by its id."""
    
    def __init__(self, network_repository: NetworkRepository):
        self._repository = network_repository
    
    async def execute(self, network_id: NetworkId) -> Network:
        """
        Get a network.
        
        Args:
            network_id: Network identifier
        
        Returns:
            Network entity
        
        Raises:
            NotFoundError: If no network has this id
        """
        try:
            network = await self._repository.find_by_id(network_id)
        except RepositoryError as e:
            raise to_use_case_error(e) from e
        
        if network is None:
            logger.warning("Network %s not found", network_id)
            raise NotFoundError("Network", str(network_id))
        return network
