"""
Create Network Use Case
=======================

Business use case for registering a new blockchain network.
"""
import logging

from network_registry.application.errors import ConflictError, to_use_case_error
from network_registry.domain.exceptions import DomainException, RepositoryError
from network_registry.domain.models.network import CreateNetworkData, Network
from network_registry.domain.repositories.network_repository import NetworkRepository

logger = logging.getLogger(__name__)


class CreateNetworkUseCase:
    """
    Use case for creating a network.
    
    The chain id must not be used by any network, active or inactive.
    """
    
    def __init__(self, network_repository: NetworkRepository):
        """
        Initialize use case with repository.
        
        Args:
            network_repository: Repository for network persistence
        """
        self._repository = network_repository
    
    async def execute(self, data: CreateNetworkData) -> Network:
        """
        Execute the create network use case.
        
        The existence check and the insert are not atomic. When two requests
        race past the check, the store's unique index rejects the second
        insert and that is reported as a conflict too.
        
        Args:
            data: Creation data
            
        Returns:
            Created network entity
            
        Raises:
            ConflictError: If the chain id is already used
            ValidationFailedError: If a field rule fails
            InternalError: If persistence fails
        """
        logger.info("Creating network chain_id=%s name=%r", data.chain_id, data.name)
        
        try:
            if await self._repository.exists_by_chain_id(data.chain_id):
                logger.warning("Network with chain_id=%s already exists", data.chain_id)
                raise ConflictError.chain_id_taken(data.chain_id)
            
            network = Network.create(data)
            created = await self._repository.create(network)
        except (DomainException, RepositoryError) as e:
            raise to_use_case_error(e) from e
        
        logger.info("Network %s created with chain_id=%s", created.id, created.chain_id)
        return created
