"""Fixtures for exercising routes through FastAPI's TestClient."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from article_desk.app import create_app
from article_desk.auth.middleware import Actor, require_authenticated_user
from article_desk.models.user import Role
from article_desk.routes.deps import articles_repository, change_ledger, users_repository


@pytest.fixture
def app(monkeypatch, articles_repo, users_repo, ledger):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("SESSION_SECRET_KEY", "test-secret")
    with patch("article_desk.app.configure_logging"):
        application = create_app()
    application.dependency_overrides[articles_repository] = lambda: articles_repo
    application.dependency_overrides[users_repository] = lambda: users_repo
    application.dependency_overrides[change_ledger] = lambda: ledger
    cosmos = MagicMock()
    cosmos.ping = AsyncMock(return_value=True)
    application.state.cosmos = cosmos
    return application


@pytest.fixture
def client(app) -> TestClient:
    """A client without lifespan, so no Cosmos connection is attempted."""
    return TestClient(app)


@pytest.fixture
def login(app):
    """Make subsequent requests act as the given user."""

    def _login(role: Role, user_id: str) -> None:
        app.dependency_overrides[require_authenticated_user] = lambda: Actor(id=user_id, role=role)

    return _login
