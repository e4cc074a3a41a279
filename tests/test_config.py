"""Tests for config.py — environment lookup, env helpers, yaml loading."""
import pytest

from jet_merchant.config import _env, _load_environments, _load_settings


# ── get_environment ──────────────────────────────────────────────────

def test_get_environment_case_insensitive(fake_config):
    assert fake_config.get_environment("production").api_url == "https://merchant-api.jet.com/api"


def test_get_environment_unknown(fake_config):
    with pytest.raises(ValueError, match="Unknown environment 'SANDBOX'"):
        fake_config.get_environment("sandbox")


def test_all_environments_sorted(fake_config):
    assert fake_config.all_environments == ["PRODUCTION", "STAGING"]


# ── _load_environments ───────────────────────────────────────────────

def test_load_environments_from_yaml(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "environments.yaml").write_text(
        "environments:\n  test:\n    api_url: https://test.example.com/api\n"
    )
    envs = _load_environments(tmp_path)
    assert envs["TEST"].api_url == "https://test.example.com/api"


def test_load_environments_default(tmp_path):
    envs = _load_environments(tmp_path)
    assert list(envs) == ["PRODUCTION"]
    assert envs["PRODUCTION"].api_url == "https://merchant-api.jet.com/api"


# ── _env helper ──────────────────────────────────────────────────────

def test_env_fallback_key(monkeypatch):
    monkeypatch.delenv("FOO", raising=False)
    monkeypatch.setenv("BAZ", "qux")
    assert _env("FOO", "BAZ") == "qux"


def test_env_default(monkeypatch):
    monkeypatch.delenv("FOO", raising=False)
    assert _env("FOO", default="fallback") == "fallback"


def test_env_strips_quotes(monkeypatch):
    monkeypatch.setenv("FOO", ' "hello" ')
    assert _env("FOO") == "hello"


# ── _load_settings ───────────────────────────────────────────────────

def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("JET_API_USER", "user")
    monkeypatch.setenv("JET_SECRET", "sec")
    monkeypatch.setenv("JET_MERCHANT_ID", "m1")
    monkeypatch.setenv("JET_TIMEOUT", "15")
    monkeypatch.delenv("JET_ENVIRONMENT", raising=False)
    settings = _load_settings()
    assert settings.api_user == "user"
    assert settings.secret == "sec"
    assert settings.merchant_id == "m1"
    assert settings.timeout == 15.0
    assert settings.environment == "production"


def test_load_settings_legacy_names(monkeypatch):
    monkeypatch.delenv("JET_API_USER", raising=False)
    monkeypatch.delenv("JET_MERCHANT_ID", raising=False)
    monkeypatch.setenv("apiUser", "legacy-user")
    monkeypatch.setenv("merchantId", "legacy-merchant")
    settings = _load_settings()
    assert settings.api_user == "legacy-user"
    assert settings.merchant_id == "legacy-merchant"
