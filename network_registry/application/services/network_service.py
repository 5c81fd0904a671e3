"""
Network Service
===============

Application service that coordinates network-related operations.
This service orchestrates the network use cases.
"""
from typing import List

from network_registry.application.use_cases.network import (
    CreateNetworkUseCase,
    DeleteNetworkUseCase,
    GetActiveNetworksUseCase,
    GetNetworkByIdUseCase,
    PartialUpdateNetworkUseCase,
    UpdateNetworkUseCase,
)
from network_registry.domain.models.network import (
    CreateNetworkData,
    Network,
    NetworkId,
    UpdateNetworkData,
)
from network_registry.domain.repositories.network_repository import NetworkRepository


class NetworkService:
    """
    Application service for network operations.
    
    This service coordinates the network use cases and provides
    a high-level interface for the API layer.
    """
    
    def __init__(self, network_repository: NetworkRepository):
        """
        Initialize service with repository.
        
        Args:
            network_repository: Repository for network persistence
        """
        self._create_use_case = CreateNetworkUseCase(network_repository)
        self._get_by_id_use_case = GetNetworkByIdUseCase(network_repository)
        self._get_active_use_case = GetActiveNetworksUseCase(network_repository)
        self._update_use_case = UpdateNetworkUseCase(network_repository)
        self._partial_update_use_case = PartialUpdateNetworkUseCase(network_repository)
        self._delete_use_case = DeleteNetworkUseCase(network_repository)
    
    async def create_network(self, data: CreateNetworkData) -> Network:
        """Create a network."""
        return await self._create_use_case.execute(data)
    
    async def get_network(self, network_id: NetworkId) -> Network:
        """Get a network by id, active or not."""
        return await self._get_by_id_use_case.execute(network_id)
    
    async def list_active_networks(self) -> List[Network]:
        """List active networks sorted by name."""
        return await self._get_active_use_case.execute()
    
    async def update_network(self, network_id: NetworkId, data: UpdateNetworkData) -> Network:
        """Replace the fields of a network (active is preserved)."""
        return await self._update_use_case.execute(network_id, data)
    
    async def patch_network(self, network_id: NetworkId, data: UpdateNetworkData) -> Network:
        """Change some fields of a network, possibly including active."""
        return await self._partial_update_use_case.execute(network_id, data)
    
    async def delete_network(self, network_id: NetworkId) -> None:
        """Soft delete a network."""
        await self._delete_use_case.execute(network_id)
