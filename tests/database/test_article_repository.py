"""Tests for ArticleRepository and the shared BaseRepository helpers."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from article_desk.database.repositories.articles import ArticleRepository
from article_desk.models.article import Article, ArticleStatus


def _aiter(items):
    async def gen():
        for item in items:
            yield item

    return gen()


class TestArticleRepository:
    """Test the Article Repository."""

    @pytest.fixture
    def container(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def repo(self, container) -> ArticleRepository:
        mock_db = MagicMock()
        mock_db.get_container_client.return_value = container
        return ArticleRepository(mock_db)

    async def test_uses_articles_container(self) -> None:
        mock_db = MagicMock()
        ArticleRepository(mock_db)
        mock_db.get_container_client.assert_called_once_with("articles")

    async def test_list_by_status(self, repo: ArticleRepository) -> None:
        """Verify list_by_status filters by status, newest first."""
        repo.query = AsyncMock(return_value=[])

        await repo.list_by_status(ArticleStatus.REJECTED)

        query_str, params = repo.query.call_args[0]
        assert "@status" in query_str
        assert "ORDER BY c.created_at DESC" in query_str
        assert params == [{"name": "@status", "value": "REJECTED"}]

    async def test_list_by_author(self, repo: ArticleRepository) -> None:
        repo.query = AsyncMock(return_value=[])

        await repo.list_by_author("author-1")

        query_str, params = repo.query.call_args[0]
        assert "c.author_id = @author_id" in query_str
        assert params[0]["value"] == "author-1"

    async def test_list_by_reviewer(self, repo: ArticleRepository) -> None:
        repo.query = AsyncMock(return_value=[])

        await repo.list_by_reviewer("reviewer-1")

        query_str, params = repo.query.call_args[0]
        assert "c.reviewer_id = @reviewer_id" in query_str
        assert params[0]["value"] == "reviewer-1"

    async def test_list_published(self, repo: ArticleRepository) -> None:
        repo.query = AsyncMock(return_value=[])

        await repo.list_published()

        assert repo.query.call_args[0][1] == [{"name": "@status", "value": "PUBLISHED"}]

    async def test_query_validates_documents(self, repo: ArticleRepository, container) -> None:
        """Verify raw documents are validated into Article models."""
        container.query_items = MagicMock(
            return_value=_aiter(
                [
                    {
                        "id": "art-1",
                        "title": "T",
                        "content": "C",
                        "status": "PENDING",
                        "author_id": "author-1",
                        "created_at": "2026-01-01T00:00:00+00:00",
                    }
                ]
            )
        )

        result = await repo.query("SELECT * FROM c")

        assert len(result) == 1
        assert isinstance(result[0], Article)
        assert result[0].status == ArticleStatus.PENDING
        assert result[0].pending_content is None

    async def test_get_returns_none_when_missing(self, repo: ArticleRepository, container) -> None:
        container.read_item = AsyncMock(
            side_effect=CosmosResourceNotFoundError(status_code=404, message="Not found")
        )

        assert await repo.get("art-1", "art-1") is None

    async def test_update_replaces_whole_document(self, repo: ArticleRepository, container) -> None:
        container.replace_item = AsyncMock()
        article = Article(id="art-1", title="T", content="C", author_id="author-1", pending_content="New")

        await repo.update(article)

        kwargs = container.replace_item.call_args.kwargs
        assert kwargs["item"] == "art-1"
        assert kwargs["body"]["pending_content"] == "New"
        assert kwargs["body"]["status"] == "PENDING"
        assert kwargs["body"]["reviewer_id"] is None

    async def test_create_serialises_json(self, repo: ArticleRepository, container) -> None:
        container.create_item = AsyncMock()
        article = Article(title="T", content="C", author_id="author-1")

        await repo.create(article)

        body = container.create_item.call_args.kwargs["body"]
        assert body["id"] == article.id
        assert isinstance(body["created_at"], str)
