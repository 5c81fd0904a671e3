"""
MongoDB Client
==============

Singleton MongoDB client manager for database connections.
The underlying client keeps a connection pool; requests borrow connections
from it concurrently, bounded by MONGO_MIN_POOL_SIZE / MONGO_MAX_POOL_SIZE.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from network_registry.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.
    
    Manages the MongoDB connection pool and provides access to collections.
    The client is created lazily on first use.
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None
    
    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection pool."""
        if self._client is not None:
            return  # Already initialized
        
        settings = self._settings
        if not settings.mongo_uri:
            raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
        
        self._client = AsyncMongoClient(
            settings.mongo_uri,
            minPoolSize=settings.mongo_min_pool_size,
            maxPoolSize=settings.mongo_max_pool_size,
            tz_aware=True,
        )
        self._database = self._client[settings.mongo_database_name]
        logger.info(
            "MongoDB client created for database %r (pool %d..%d)",
            settings.mongo_database_name,
            settings.mongo_min_pool_size,
            settings.mongo_max_pool_size,
        )
    
    def get_database(self) -> AsyncDatabase:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database
    
    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a MongoDB collection.
        
        Args:
            collection_name: Name of the collection
            
        Returns:
            MongoDB AsyncCollection object
        """
        return self.get_database()[collection_name]
    
    async def close(self) -> None:
        """Close MongoDB connection pool."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")


# Global client manager instance (singleton pattern)
_mongo_client: Optional[MongoClientManager] = None


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = MongoClientManager()
    return _mongo_client
