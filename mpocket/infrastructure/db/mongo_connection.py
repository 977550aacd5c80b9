"""
MongoDB Client
==============

Shared MongoDB client for database connections.
"""
import logging
import threading
from typing import Any, Callable, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from mpocket.domain.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Any]


class MongoClientManager:
    """
    MongoDB client manager.

    Connects lazily on the first ensure_connected() call and reuses the same
    client afterwards. The connect step is guarded by a lock, so concurrent
    first calls make a single connection attempt.
    """

    def __init__(
        self,
        mongo_uri: str,
        database_name: str,
        timeout_ms: int = 5000,
        client_factory: ClientFactory = MongoClient,
    ):
        """
        Args:
            mongo_uri: MongoDB connection string
            database_name: Database holding the application collections
            timeout_ms: Server selection timeout passed to the driver
            client_factory: Callable building the driver client (MongoClient by default)
        """
        self._mongo_uri = mongo_uri
        self._database_name = database_name
        self._timeout_ms = timeout_ms
        self._client_factory = client_factory
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    def ensure_connected(self) -> Database:
        """
        Connect to MongoDB if not connected yet.

        Returns:
            MongoDB database instance

        Raises:
            StoreConnectionError: If the server cannot be reached
        """
        if self._database is not None:
            return self._database

        with self._lock:
            if self._database is not None:
                return self._database

            client = None
            try:
                client = self._client_factory(
                    self._mongo_uri,
                    serverSelectionTimeoutMS=self._timeout_ms,
                )
                # MongoClient connects in the background; ping forces a round trip
                client.admin.command("ping")
            except PyMongoError as e:
                logger.error("❌ MongoDB Connection Error: %s", e)
                if client is not None:
                    client.close()
                raise StoreConnectionError(f"MongoDB Connection Error: {e}") from e

            self._client = client
            self._database = client[self._database_name]
            logger.info("✅ Connected to MongoDB: %s", self._database_name)
            return self._database

    def get_database(self) -> Database:
        """Get MongoDB database instance, connecting first if needed."""
        return self.ensure_connected()

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        database = self.get_database()
        return database[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        with self._lock:
            if self._client is not None:
                self._client.close()
            self._client = None
            self._database = None

