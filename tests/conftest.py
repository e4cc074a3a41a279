"""Shared fixtures for the jet-merchant test suite."""
from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest

from jet_merchant.client import JetClient
from jet_merchant.config import Config, Environment, Settings


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        api_user="test-user",
        secret="test-secret",
        merchant_id="test-merchant",
        environment="production",
        timeout=10.0,
    )


@pytest.fixture
def fake_environments() -> dict[str, Environment]:
    return {
        "PRODUCTION": Environment(api_url="https://merchant-api.jet.com/api"),
        "STAGING": Environment(api_url="https://staging.example.com/api"),
    }


@pytest.fixture
def fake_config(fake_settings, fake_environments) -> Config:
    return Config(settings=fake_settings, environments=fake_environments)


@pytest.fixture
def mock_auth():
    auth = MagicMock()
    auth.get_auth_header.side_effect = lambda force_refresh=False: {"Authorization": "Bearer test-token"}
    auth.close = MagicMock()
    return auth


@pytest.fixture
def client(mock_auth):
    """JetClient with auth and transport replaced by mocks."""
    c = JetClient("test-user", "test-secret", "test-merchant", auth=mock_auth)
    c._http = MagicMock()
    c._http.request.return_value = _resp(200, '{"ok": true}')
    return c


@pytest.fixture
def mock_client():
    """MagicMock standing in for JetClient."""
    client = MagicMock()
    client.rest_get_with_token = MagicMock()
    client.rest_put_with_token = MagicMock()
    client.rest_post_with_token = MagicMock()
    client.request_without_token = MagicMock()
    return client


def _resp(status_code: int = 200, text: str = "") -> httpx.Response:
    """Build a real httpx.Response with a text body."""
    return httpx.Response(status_code, content=text.encode("utf-8"))
