"""
MongoDB Network Repository
==========================

Concrete implementation of NetworkRepository using MongoDB.

Documents are keyed by the string form of the network id. A unique index on
chain_id is the source of truth for chain id uniqueness; the use case
pre-checks only exist to return a friendly conflict.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from bson.decimal128 import Decimal128
from pymongo import ASCENDING, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from network_registry.domain.constants.network_fields import NetworkFields
from network_registry.domain.exceptions import DomainException, DuplicateChainIdError, RepositoryError
from network_registry.domain.models.network import Network, NetworkId
from network_registry.domain.repositories.network_repository import NetworkRepository
from network_registry.utils.datetime_utils import now, truncate

logger = logging.getLogger(__name__)


def _to_bson_datetime(value: datetime) -> datetime:
    # BSON dates have millisecond precision
    return truncate(value)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return Decimal(str(value))


class MongoNetworkRepository(NetworkRepository):
    """
    MongoDB implementation of NetworkRepository.
    
    Handles all network persistence operations using MongoDB.
    """
    
    def __init__(self, collection: AsyncCollection):
        """
        Initialize repository with a MongoDB collection.
        
        Args:
            collection: Collection holding network documents
        """
        self._collection = collection
    
    async def ensure_indexes(self) -> None:
        """Create the unique chain_id index and the lookup indexes."""
        try:
            await self._collection.create_index(
                [(NetworkFields.CHAIN_ID, ASCENDING)],
                unique=True,
                name="uniq_networks_chain_id",
            )
            await self._collection.create_index([(NetworkFields.ACTIVE, ASCENDING)], name="idx_networks_active")
            await self._collection.create_index([(NetworkFields.NAME, ASCENDING)], name="idx_networks_name")
        except PyMongoError as e:
            raise RepositoryError(f"Failed to create network indexes: {e}") from e
    
    def _to_entity(self, doc: Dict[str, Any]) -> Network:
        """Convert MongoDB document to Network entity."""
        try:
            return Network.restore(
                id=NetworkId.parse(doc[NetworkFields.MONGO_ID]),
                chain_id=int(doc[NetworkFields.CHAIN_ID]),
                name=doc[NetworkFields.NAME],
                rpc_url=doc[NetworkFields.RPC_URL],
                other_rpc_urls=list(doc.get(NetworkFields.OTHER_RPC_URLS) or []),
                test_net=bool(doc.get(NetworkFields.TEST_NET, False)),
                block_explorer_url=doc[NetworkFields.BLOCK_EXPLORER_URL],
                fee_multiplier=_to_decimal(doc[NetworkFields.FEE_MULTIPLIER]),
                gas_limit_multiplier=_to_decimal(doc[NetworkFields.GAS_LIMIT_MULTIPLIER]),
                active=bool(doc.get(NetworkFields.ACTIVE, True)),
                default_signer_address=doc[NetworkFields.DEFAULT_SIGNER_ADDRESS],
                created_at=doc[NetworkFields.CREATED_AT],
                updated_at=doc[NetworkFields.UPDATED_AT],
            )
        except (KeyError, TypeError, ValueError, ArithmeticError, DomainException) as e:
            raise RepositoryError(
                f"Failed to map network document {doc.get(NetworkFields.MONGO_ID)!r}: {e}"
            ) from e
    
    def _to_document(self, network: Network) -> Dict[str, Any]:
        """Convert Network entity to MongoDB document."""
        return {
            NetworkFields.MONGO_ID: str(network.id),
            NetworkFields.CHAIN_ID: network.chain_id,
            NetworkFields.NAME: network.name,
            NetworkFields.RPC_URL: network.rpc_url,
            NetworkFields.OTHER_RPC_URLS: list(network.other_rpc_urls),
            NetworkFields.TEST_NET: network.test_net,
            NetworkFields.BLOCK_EXPLORER_URL: network.block_explorer_url,
            NetworkFields.FEE_MULTIPLIER: Decimal128(network.fee_multiplier),
            NetworkFields.GAS_LIMIT_MULTIPLIER: Decimal128(network.gas_limit_multiplier),
            NetworkFields.ACTIVE: network.active,
            NetworkFields.DEFAULT_SIGNER_ADDRESS: network.default_signer_address,
            NetworkFields.CREATED_AT: _to_bson_datetime(network.created_at),
            NetworkFields.UPDATED_AT: _to_bson_datetime(network.updated_at),
        }
    
    async def find_by_id(self, network_id: NetworkId) -> Optional[Network]:
        """Find a network by its ID."""
        try:
            doc = await self._collection.find_one({NetworkFields.MONGO_ID: str(network_id)})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load network {network_id}: {e}") from e
        if not doc:
            return None
        return self._to_entity(doc)
    
    async def find_by_chain_id(self, chain_id: int) -> Optional[Network]:
        """Find a network by its chain ID."""
        try:
            doc = await self._collection.find_one({NetworkFields.CHAIN_ID: chain_id})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load network with chain_id {chain_id}: {e}") from e
        if not doc:
            return None
        return self._to_entity(doc)
    
    async def find_all_active(self) -> List[Network]:
        """Find all active networks, sorted by name."""
        try:
            cursor = self._collection.find({NetworkFields.ACTIVE: True}).sort(NetworkFields.NAME, ASCENDING)
            docs = await cursor.to_list()
        except PyMongoError as e:
            raise RepositoryError(f"Failed to list active networks: {e}") from e
        return [self._to_entity(doc) for doc in docs]
    
    async def create(self, network: Network) -> Network:
        """Create a new network."""
        doc = self._to_document(network)
        try:
            await self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            logger.warning("Unique index rejected network with chain_id=%s", network.chain_id)
            raise DuplicateChainIdError(network.chain_id) from e
        except PyMongoError as e:
            raise RepositoryError(f"Failed to insert network {network.id}: {e}") from e
        return self._to_entity(doc)
    
    async def update(self, network: Network) -> Optional[Network]:
        """Update an existing network. created_at is never rewritten."""
        doc = self._to_document(network)
        changes = {
            key: value
            for key, value in doc.items()
            if key not in (NetworkFields.MONGO_ID, NetworkFields.CREATED_AT)
        }
        try:
            result = await self._collection.find_one_and_update(
                {NetworkFields.MONGO_ID: str(network.id)},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            logger.warning("Unique index rejected chain_id=%s for network %s", network.chain_id, network.id)
            raise DuplicateChainIdError(network.chain_id) from e
        except PyMongoError as e:
            raise RepositoryError(f"Failed to update network {network.id}: {e}") from e
        
        if not result:
            return None
        return self._to_entity(result)
    
    async def soft_delete(self, network_id: NetworkId) -> bool:
        """Soft delete (deactivate) a network."""
        try:
            result = await self._collection.update_one(
                {NetworkFields.MONGO_ID: str(network_id)},
                {
                    "$set": {
                        NetworkFields.ACTIVE: False,
                        NetworkFields.UPDATED_AT: _to_bson_datetime(now()),
                    }
                },
            )
        except PyMongoError as e:
            raise RepositoryError(f"Failed to delete network {network_id}: {e}") from e
        return result.matched_count > 0
    
    async def exists_by_chain_id(
        self,
        chain_id: int,
        exclude_id: Optional[NetworkId] = None,
    ) -> bool:
        """Check if a chain ID is used by any network other than exclude_id."""
        query: Dict[str, Any] = {NetworkFields.CHAIN_ID: chain_id}
        if exclude_id is not None:
            query[NetworkFields.MONGO_ID] = {"$ne": str(exclude_id)}
        try:
            count = await self._collection.count_documents(query, limit=1)
        except PyMongoError as e:
            raise RepositoryError(f"Failed to check chain_id {chain_id}: {e}") from e
        return count > 0
