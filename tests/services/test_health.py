"""Tests for the Cosmos DB emulator pre-flight check."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from article_desk.services.health import check_emulators


def _settings(endpoint: str) -> SimpleNamespace:
    return SimpleNamespace(cosmos=SimpleNamespace(endpoint=endpoint))


async def test_missing_endpoint_fails():
    assert await check_emulators(_settings("")) is False


async def test_cloud_endpoint_is_not_probed():
    with patch("article_desk.services.health.httpx.AsyncClient") as client_cls:
        assert await check_emulators(_settings("https://acct.documents.azure.com:443/")) is True
    client_cls.assert_not_called()


def _client(get: AsyncMock) -> MagicMock:
    client = MagicMock()
    client.get = get
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


async def test_unreachable_emulator_fails():
    client = _client(AsyncMock(side_effect=httpx.ConnectError("refused")))
    with patch("article_desk.services.health.httpx.AsyncClient", return_value=client):
        assert await check_emulators(_settings("http://localhost:8081")) is False


async def test_reachable_emulator_passes():
    client = _client(AsyncMock(return_value=MagicMock(status_code=200)))
    with patch("article_desk.services.health.httpx.AsyncClient", return_value=client):
        assert await check_emulators(_settings("http://localhost:8081/")) is True
    client.get.assert_awaited_once_with("http://localhost:8081/")
