"""Async Cosmos DB client initialization."""

from __future__ import annotations

import logging

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient as AzureCosmosClient
from azure.cosmos.aio import DatabaseProxy

from article_desk.config import CosmosConfig

logger = logging.getLogger(__name__)

CONTAINERS = ("articles", "users")


class CosmosClient:
    """Manages the async Cosmos DB client and database reference."""

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self) -> None:
        """Create the client and obtain a database reference."""
        self._client = AzureCosmosClient(self._config.endpoint, credential=self._config.key)
        self._database = await self._client.create_database_if_not_exists(self._config.database)

    async def ensure_containers(self) -> None:
        """Create the article and user containers when missing (partitioned by /id)."""
        for name in CONTAINERS:
            await self.database.create_container_if_not_exists(
                id=name, partition_key=PartitionKey(path="/id")
            )
        logger.info("Cosmos containers ready: database=%s containers=%s", self._config.database, ",".join(CONTAINERS))

    async def ping(self) -> bool:
        """Return True when the database answers a metadata read."""
        try:
            await self.database.read()
        except Exception:  # noqa: BLE001
            logger.warning("Cosmos DB ping failed", exc_info=True)
            return False
        return True

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            raise RuntimeError("CosmosClient not initialized, call initialize() first")
        return self._database
