"""
Update Network Use Case
=======================

Business use case for replacing the fields of an existing network (PUT).
"""
import dataclasses
import logging

from network_registry.application.errors import (
    ConflictError,
    NotFoundError,
    to_use_case_error,
)
from network_registry.domain.exceptions import DomainException, RepositoryError
from network_registry.domain.models.network import Network, NetworkId, UpdateNetworkData
from network_registry.domain.repositories.network_repository import NetworkRepository

logger = logging.getLogger(__name__)


async def apply_network_update(
    repository: NetworkRepository,
    network_id: NetworkId,
    data: UpdateNetworkData,
) -> Network:
    """
    Load a network, merge the update into it and persist the result.
    
    Steps:
    1. Load the network; missing -> NotFoundError
    2. If the chain id changes, make sure no other network uses it
    3. Merge the provided fields and re-validate the merged network
    4. Persist; a network deleted since step 1 -> NotFoundError
    
    Raises:
        NotFoundError: If the network does not exist
        ConflictError: If the new chain id is taken
        ValidationFailedError: If the merged network breaks a field rule
        InternalError: If persistence fails
    """
    try:
        existing = await repository.find_by_id(network_id)
        if existing is None:
            logger.warning("Network %s not found for update", network_id)
            raise NotFoundError("Network", str(network_id))
        
        new_chain_id = data.chain_id
        if new_chain_id is not None and new_chain_id != existing.chain_id:
            if await repository.exists_by_chain_id(new_chain_id, exclude_id=network_id):
                logger.warning(
                    "Cannot update network %s: chain_id=%s already exists",
                    network_id,
                    new_chain_id,
                )
                raise ConflictError.chain_id_taken(new_chain_id)
        
        merged = existing.with_updates(data)
        merged.validate()
        
        updated = await repository.update(merged)
    except (DomainException, RepositoryError) as e:
        raise to_use_case_error(e) from e
    
    if updated is None:
        logger.warning("Network %s disappeared before it could be updated", network_id)
        raise NotFoundError("Network", str(network_id))
    
    logger.info("Network %s updated", network_id)
    return updated


class UpdateNetworkUseCase:
    """
    Use case for a full update of a network.
    
    `active` cannot be changed here: a deleted network stays deleted.
    """
    
    def __init__(self, network_repository: NetworkRepository):
        """
        Initialize use case with repository.
        
        Args:
            network_repository: Repository for network persistence
        """
        self._repository = network_repository
    
    async def execute(self, network_id: NetworkId, data: UpdateNetworkData) -> Network:
        """
        Execute the update network use case.
        
        Args:
            network_id: Network identifier
            data: New field values; any `active` value is ignored
            
        Returns:
            Updated network entity
        """
        logger.info("Updating network %s", network_id)
        return await apply_network_update(
            self._repository,
            network_id,
            dataclasses.replace(data, active=None),
        )
