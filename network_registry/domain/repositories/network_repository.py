"""
Network Repository Interface
============================

Abstract interface for network data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from network_registry.domain.models.network import Network, NetworkId


class NetworkRepository(ABC):
    """
    Abstract repository for network persistence operations.

    This interface defines the contract for network data access.
    Concrete implementations should be in the infrastructure layer.

    Implementations raise RepositoryError for persistence failures and
    DuplicateChainIdError when the store's uniqueness constraint on
    chain_id rejects a write. They never retry.
    """

    async def ensure_indexes(self) -> None:
        """
        Prepare the backing store (indexes, constraints) at startup.

        Stores that need no preparation keep this default.
        """
        return None

    @abstractmethod
    async def find_by_id(self, network_id: NetworkId) -> Optional[Network]:
        """
        Find a network by its ID.

        Args:
            network_id: Unique network identifier

        Returns:
            Network entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_chain_id(self, chain_id: int) -> Optional[Network]:
        """
        Find a network by its chain ID, active or not.

        Args:
            chain_id: Blockchain chain identifier

        Returns:
            Network entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_active(self) -> List[Network]:
        """
        Find all active networks.

        Returns:
            List of active network entities, sorted by name ascending
        """
        pass

    @abstractmethod
    async def create(self, network: Network) -> Network:
        """
        Create a new network.

        Args:
            network: Network entity to create

        Returns:
            Created network entity as stored
        """
        pass

    @abstractmethod
    async def update(self, network: Network) -> Optional[Network]:
        """
        Update an existing network.

        Args:
            network: Network entity with updated data

        Returns:
            Updated network entity, or None if no network has this ID
        """
        pass

    @abstractmethod
    async def soft_delete(self, network_id: NetworkId) -> bool:
        """
        Soft delete a network (set active to false).

        Args:
            network_id: Unique network identifier

        Returns:
            True if a network was found and marked inactive, False otherwise
        """
        pass

    @abstractmethod
    async def exists_by_chain_id(
        self,
        chain_id: int,
        exclude_id: Optional[NetworkId] = None,
    ) -> bool:
        """
        Check if any network (active or inactive) uses a chain ID.

        Args:
            chain_id: Blockchain chain identifier
            exclude_id: Network to ignore in the check (the one being updated)

        Returns:
            True if another network uses the chain ID, False otherwise
        """
        pass
