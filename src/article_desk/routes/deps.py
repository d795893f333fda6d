"""Request-scoped dependencies resolving repositories and the change ledger."""

from __future__ import annotations

from fastapi import Request

from article_desk.changes.ledger import ChangeLedger
from article_desk.database.repositories.articles import ArticleRepository
from article_desk.database.repositories.users import UserRepository


def articles_repository(request: Request) -> ArticleRepository:
    return ArticleRepository(request.app.state.cosmos.database)


def users_repository(request: Request) -> UserRepository:
    return UserRepository(request.app.state.cosmos.database)


def change_ledger(request: Request) -> ChangeLedger:
    return request.app.state.ledger
