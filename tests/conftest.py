"""Shared fixtures: in-memory stand-ins for the Cosmos-backed repositories."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from article_desk.changes.ledger import ChangeLedger
from article_desk.models.article import Article, ArticleStatus, ReviewStatus
from article_desk.models.user import Role, User


class InMemoryArticleRepository:
    """Dict-backed replacement for ArticleRepository."""

    def __init__(self) -> None:
        self.items: dict[str, Article] = {}
        self.update_calls = 0

    async def create(self, item: Article) -> Article:
        self.items[item.id] = item.model_copy(deep=True)
        return item

    async def get(self, item_id: str, partition_key: str) -> Article | None:
        item = self.items.get(item_id)
        return item.model_copy(deep=True) if item else None

    async def update(self, item: Article) -> Article:
        self.update_calls += 1
        self.items[item.id] = item.model_copy(deep=True)
        return item

    def _newest_first(self, articles):
        return sorted(articles, key=lambda a: a.created_at, reverse=True)

    async def list_by_status(self, status: ArticleStatus) -> list[Article]:
        return self._newest_first(a for a in self.items.values() if a.status == status)

    async def list_by_author(self, author_id: str) -> list[Article]:
        return self._newest_first(a for a in self.items.values() if a.author_id == author_id)

    async def list_by_reviewer(self, reviewer_id: str) -> list[Article]:
        return self._newest_first(a for a in self.items.values() if a.reviewer_id == reviewer_id)

    async def list_published(self) -> list[Article]:
        return await self.list_by_status(ArticleStatus.PUBLISHED)


class InMemoryUserRepository:
    """Dict-backed replacement for UserRepository."""

    def __init__(self, users: list[User]) -> None:
        self.items = {u.id: u for u in users}

    async def list_reviewers(self) -> list[User]:
        return [u for u in self.items.values() if u.role == Role.REVIEWER]

    async def get_reviewer(self, user_id: str) -> User | None:
        user = self.items.get(user_id)
        return user if user and user.role == Role.REVIEWER else None


@pytest.fixture
def articles_repo() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def users_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository(
        [
            User(id="author-1", name="Ada", email="ada@example.com", role=Role.AUTHOR),
            User(id="reviewer-1", name="Rae", email="rae@example.com", role=Role.REVIEWER),
            User(id="reviewer-2", name="Rex", email="rex@example.com", role=Role.REVIEWER),
            User(id="admin-1", name="Max", email="max@example.com", role=Role.ADMIN),
        ]
    )


@pytest.fixture
def ledger() -> ChangeLedger:
    return ChangeLedger()


@pytest.fixture
def make_article(articles_repo):
    """Store an article with the given fields and return it."""
    counter = {"n": 0}

    def _make(**fields) -> Article:
        counter["n"] += 1
        defaults = {
            "id": f"art-{counter['n']}",
            "title": "Draft",
            "content": "The cat sat",
            "author_id": "author-1",
            "created_at": datetime(2026, 1, 1, tzinfo=UTC) + timedelta(minutes=counter["n"]),
        }
        article = Article(**{**defaults, **fields})
        articles_repo.items[article.id] = article
        return article

    return _make


@pytest.fixture
def reviewer_submitted(make_article):
    """An article whose reviewer has proposed changes."""
    return make_article(
        status=ArticleStatus.PENDING,
        reviewer_id="reviewer-1",
        review_status=ReviewStatus.PENDING,
        previous_content="The cat sat",
        pending_content="The dog sat",
    )


@pytest.fixture
def author_revision(make_article):
    """A rejected article carrying an approved author revision."""
    return make_article(
        status=ArticleStatus.REJECTED,
        revision_requested=True,
        revision_approved=True,
        previous_content="The cat sat",
        pending_content="The dog sat",
    )
