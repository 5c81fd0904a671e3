"""
Get Active Networks Use Case
============================

Use case for listing the networks that have not been deleted.
"""
from typing import List

from network_registry.application.errors import to_use_case_error
from network_registry.domain.exceptions import RepositoryError
from network_registry.domain.models.network import Network
from network_registry.domain.repositories.network_repository import NetworkRepository


class GetActiveNetworksUseCase:
    """Use case for listing active networks."""
    
    def __init__(self, network_repository: NetworkRepository):
        self._repository = network_repository
    
    async def execute(self) -> List[Network]:
        """
        List active networks, sorted by name ascending.
        
        An empty list is a valid result.
        """
        try:
            return await self._repository.find_all_active()
        except RepositoryError as e:
            raise to_use_case_error(e) from e
