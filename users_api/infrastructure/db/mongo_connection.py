"""
MongoDB Connection
==================

The process's single persistence handle. Created by the DI container,
connected once in the application lifespan and handed to repositories.
"""
import asyncio
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from users_api.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owns the MongoDB client for the life of the process.

    The client is created lazily by `connect()`, which also pings the server
    so an unreachable store is detected at startup rather than on the first
    request.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
        connect_retries: int = 0,
        connect_backoff_sec: float = 1.0,
    ):
        """
        Args:
            uri: MongoDB connection string
            database_name: Database to use when the URI names none
            server_selection_timeout_ms: Driver server-selection timeout
            connect_retries: Extra connect attempts after the first failure
            connect_backoff_sec: Delay before the first retry, doubled after each
        """
        self._uri = uri
        self._database_name = database_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._connect_retries = connect_retries
        self._connect_backoff_sec = connect_backoff_sec
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    def _create_client(self) -> AsyncMongoClient:
        return AsyncMongoClient(
            self._uri,
            serverSelectionTimeoutMS=self._server_selection_timeout_ms,
            tz_aware=True,
        )

    async def _connect_once(self) -> None:
        client = self._create_client()
        try:
            await client.admin.command("ping")
        except PyMongoError:
            await client.close()
            raise
        self._client = client
        self._database = client.get_default_database(default=self._database_name)

    async def connect(self) -> None:
        """
        Connect and verify the server responds.

        Raises:
            StoreUnavailableError: If every attempt fails
        """
        if self.is_connected:
            return

        attempts = self._connect_retries + 1
        delay = self._connect_backoff_sec
        for attempt in range(1, attempts + 1):
            try:
                await self._connect_once()
            except PyMongoError as e:
                logger.error(
                    "MongoDB connection failed (attempt %d/%d): %s", attempt, attempts, e
                )
                if attempt == attempts:
                    raise StoreUnavailableError(str(e)) from e
                await asyncio.sleep(delay)
                delay *= 2
            else:
                logger.info("Connected to MongoDB: %s", self._database.name)
                return

    def get_database(self) -> AsyncDatabase:
        """Get the database; only valid after `connect()`."""
        if self._database is None:
            raise StoreUnavailableError("MongoDB is not connected. Call connect() on startup.")
        return self._database

    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            Async collection handle
        """
        return self.get_database()[collection_name]

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None
