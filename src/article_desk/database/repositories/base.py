"""Generic repository over a single Cosmos DB container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from article_desk.models.base import DocumentBase

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

T = TypeVar("T", bound=DocumentBase)


class BaseRepository(Generic[T]):
    """CRUD and query helpers shared by every container repository."""

    container_name: ClassVar[str]
    model_class: type[T]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container = database.get_container_client(self.container_name)

    async def create(self, item: T) -> T:
        """Insert a new document."""
        await self._container.create_item(body=item.model_dump(mode="json"))
        return item

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Read a document by id, or None when it does not exist."""
        try:
            data = await self._container.read_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return None
        return self.model_class.model_validate(data)

    async def update(self, item: T) -> T:
        """Replace a document with the given model state."""
        await self._container.replace_item(item=item.id, body=item.model_dump(mode="json"))
        return item

    async def query(self, sql: str, parameters: list[dict[str, Any]] | None = None) -> list[T]:
        """Run a parameterised query and validate each result."""
        results: list[T] = []
        async for data in self._container.query_items(sql, parameters=parameters or []):
            results.append(self.model_class.model_validate(cast("dict[str, Any]", data)))
        return results
