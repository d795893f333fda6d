"""Cosmos DB persistence for articles and users."""

from article_desk.database.client import CosmosClient

__all__ = ["CosmosClient"]
