"""Repository for the articles container (partitioned by /id)."""

from __future__ import annotations

from article_desk.database.repositories.base import BaseRepository
from article_desk.models.article import Article, ArticleStatus


class ArticleRepository(BaseRepository[Article]):
    """Provide data access for the articles container."""

    container_name = "articles"
    model_class = Article

    async def list_by_status(self, status: ArticleStatus) -> list[Article]:
        """Fetch articles with a given primary status, newest first."""
        return await self.query(
            "SELECT * FROM c WHERE c.status = @status ORDER BY c.created_at DESC",
            [{"name": "@status", "value": status.value}],
        )

    async def list_by_author(self, author_id: str) -> list[Article]:
        """Fetch every article written by an author, newest first."""
        return await self.query(
            "SELECT * FROM c WHERE c.author_id = @author_id ORDER BY c.created_at DESC",
            [{"name": "@author_id", "value": author_id}],
        )

    async def list_by_reviewer(self, reviewer_id: str) -> list[Article]:
        """Fetch articles currently assigned to a reviewer, newest first."""
        return await self.query(
            "SELECT * FROM c WHERE c.reviewer_id = @reviewer_id ORDER BY c.created_at DESC",
            [{"name": "@reviewer_id", "value": reviewer_id}],
        )

    async def list_published(self) -> list[Article]:
        """Fetch the public feed."""
        return await self.list_by_status(ArticleStatus.PUBLISHED)
