"""Repository modules for each Cosmos DB container."""

from article_desk.database.repositories.articles import ArticleRepository
from article_desk.database.repositories.users import UserRepository

__all__ = [
    "ArticleRepository",
    "UserRepository",
]
