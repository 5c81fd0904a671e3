"""
Delete Network Use Case
=======================

Business use case for removing (deactivating) a network.
Networks are never hard-deleted.
"""
import logging

from network_registry.application.errors import NotFoundError, to_use_case_error
from network_registry.domain.exceptions import RepositoryError
from network_registry.domain.models.network import NetworkId
from network_registry.domain.repositories.network_repository import NetworkRepository

logger = logging.getLogger(__name__)


class DeleteNetworkUseCase:
    """Use case for soft-deleting a network."""
    
    def __init__(self, network_repository: NetworkRepository):
        """
        Initialize use case with repository.
        
        Args:
            network_repository: Repository for network persistence
        """
        self._repository = network_repository
    
    async def execute(self, network_id: NetworkId) -> None:
        """
        Execute the delete network use case.
        
        Args:
            network_id: Network identifier
            
        Raises:
            NotFoundError: If no network has this id
        """
        logger.info("Soft deleting network %s", network_id)
        
        try:
            deleted = await self._repository.soft_delete(network_id)
        except RepositoryError as e:
            raise to_use_case_error(e) from e
        
        if not deleted:
            logger.warning("Network %s not found for deletion", network_id)
            raise NotFoundError("Network", str(network_id))
        
        logger.info("Network %s deactivated", network_id)
