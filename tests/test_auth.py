"""Tests for auth.py — token fetch, caching, expiry, status."""
import json
import threading
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import httpx
import pytest

from jet_merchant.auth import AuthManager
from jet_merchant.utils.errors import AuthenticationError

API_URL = "https://merchant-api.jet.com/api"


def _token_response(id_token="abc123", token_type="Bearer", expires_on=None, status_code=200):
    if expires_on is None:
        expires_on = (datetime.now(timezone.utc) + timedelta(hours=10)).isoformat()
    body = {"id_token": id_token, "token_type": token_type, "expires_on": expires_on}
    return httpx.Response(status_code, content=json.dumps(body).encode())


@pytest.fixture
def auth():
    a = AuthManager("test-user", "test-secret", API_URL)
    a._http = MagicMock()
    a._http.post.return_value = _token_response()
    return a


# ── Token fetch ──────────────────────────────────────────────────────

def test_first_call_fetches_token(auth):
    assert auth.get_auth_header() == {"Authorization": "Bearer abc123"}
    auth._http.post.assert_called_once()


def test_fetch_posts_to_token_endpoint(auth):
    auth.get_auth_header()
    assert auth._http.post.call_args[0][0] == f"{API_URL}/token"


def test_fetch_sends_credentials(auth):
    auth.get_auth_header()
    body = json.loads(auth._http.post.call_args[1]["content"])
    assert body == {"user": "test-user", "pass": "test-secret"}


def test_token_type_used_verbatim(auth):
    auth._http.post.return_value = _token_response(id_token="xyz", token_type="JWT")
    assert auth.get_auth_header() == {"Authorization": "JWT xyz"}


# ── Caching / expiry ─────────────────────────────────────────────────

def test_expired_token_fetched_once_then_cached(auth):
    auth._id_token = "old"
    auth._token_type = "Bearer"
    auth._expires_on = datetime.now(timezone.utc) - timedelta(minutes=1)

    assert auth.get_auth_header() == {"Authorization": "Bearer abc123"}
    assert auth._http.post.call_count == 1

    assert auth.get_auth_header() == {"Authorization": "Bearer abc123"}
    assert auth._http.post.call_count == 1


def test_valid_token_not_refetched(auth):
    auth._id_token = "cached"
    auth._token_type = "Bearer"
    auth._expires_on = datetime.now(timezone.utc) + timedelta(minutes=1)

    assert auth.get_auth_header() == {"Authorization": "Bearer cached"}
    auth._http.post.assert_not_called()


def test_expiry_exactly_now_refetches(auth, monkeypatch):
    frozen = datetime(2024, 1, 1, tzinfo=timezone.utc)

    class _FrozenDatetime(datetime):
        @classmethod
        def now(cls, tz=None):
            return frozen

    monkeypatch.setattr("jet_merchant.auth.datetime", _FrozenDatetime)
    auth._id_token = "old"
    auth._token_type = "Bearer"
    auth._expires_on = frozen

    auth.get_auth_header()
    auth._http.post.assert_called_once()


def test_force_refresh_bypasses_cache(auth):
    auth.get_auth_header()
    auth.get_auth_header(force_refresh=True)
    assert auth._http.post.call_count == 2


def test_concurrent_callers_fetch_once(auth):
    barrier = threading.Barrier(5)

    def call():
        barrier.wait()
        auth.get_auth_header()

    threads = [threading.Thread(target=call) for _ in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert auth._http.post.call_count == 1


def test_expires_on_with_seven_fraction_digits(auth):
    auth._http.post.return_value = _token_response(expires_on="2099-01-11T22:30:11.4287744Z")
    auth.get_auth_header()
    assert auth._expires_on == datetime(2099, 1, 11, 22, 30, 11, 428774, tzinfo=timezone.utc)


# ── Failures ─────────────────────────────────────────────────────────

def test_non_2xx_raises_auth_error(auth):
    auth._http.post.return_value = httpx.Response(401, content=b'{"message": "bad creds"}')
    with pytest.raises(AuthenticationError, match="HTTP 401"):
        auth.get_auth_header()


def test_transport_error_raises_auth_error(auth):
    auth._http.post.side_effect = httpx.ConnectError("connection refused")
    with pytest.raises(AuthenticationError, match="connection refused"):
        auth.get_auth_header()
    assert auth._http.post.call_count == 1


def test_malformed_token_body_raises_auth_error(auth):
    auth._http.post.return_value = httpx.Response(200, content=b'{"token_type": "Bearer"}')
    with pytest.raises(AuthenticationError, match="Unexpected token response"):
        auth.get_auth_header()


def test_missing_token_type_raises_auth_error(auth):
    body = b'{"id_token": "abc123", "expires_on": "2099-01-01T00:00:00Z"}'
    auth._http.post.return_value = httpx.Response(200, content=body)
    with pytest.raises(AuthenticationError, match="Unexpected token response"):
        auth.get_auth_header()


# ── get_status ───────────────────────────────────────────────────────

def test_status_no_token(auth):
    status = auth.get_status()
    assert status.has_token is False
    assert status.is_expired is True
    assert status.seconds_remaining is None


def test_status_after_fetch(auth):
    auth.get_auth_header()
    status = auth.get_status()
    assert status.has_token is True
    assert status.is_expired is False
    assert status.token_type == "Bearer"
    assert status.seconds_remaining > 0


def test_status_expired(auth):
    auth._id_token = "old"
    auth._token_type = "Bearer"
    auth._expires_on = datetime.now(timezone.utc) - timedelta(seconds=5)
    status = auth.get_status()
    assert status.is_expired is True
    assert status.seconds_remaining is None
