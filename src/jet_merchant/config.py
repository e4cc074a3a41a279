"""Configuration management for the jet-merchant CLI.

Loads credentials from .env and API environments from environments.yaml.
The library itself takes credentials as constructor arguments; this module
only serves the command-line front end.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv

DEFAULT_ENVIRONMENTS = {
    "PRODUCTION": {"api_url": "https://merchant-api.jet.com/api"},
}


class Environment(BaseModel):
    """A single API environment."""
    api_url: str


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    api_user: str = Field(description="Jet API user")
    secret: str = Field(description="Jet API secret")
    merchant_id: str = Field(description="Jet merchant ID")
    environment: str = Field(default="production", description="Name of the API environment")
    timeout: float = Field(default=60.0, description="HTTP timeout in seconds")


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings
    environments: dict[str, Environment]

    def get_environment(self, name: str) -> Environment:
        """Get an API environment by name (e.g. production)."""
        name = name.upper()
        if name not in self.environments:
            available = ", ".join(sorted(self.environments.keys()))
            raise ValueError(f"Unknown environment '{name}'. Available: {available}")
        return self.environments[name]

    @property
    def all_environments(self) -> list[str]:
        """List all configured environment names."""
        return sorted(self.environments.keys())


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where config/ lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / "config" / "environments.yaml").exists():
            return parent
    # Fallback: cwd
    return Path.cwd()


def _load_environments(project_root: Path) -> dict[str, Environment]:
    """Load API environments from environments.yaml, falling back to production only."""
    path = project_root / "config" / "environments.yaml"
    data = {"environments": DEFAULT_ENVIRONMENTS}
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or data

    return {
        name.upper(): Environment(**env_data)
        for name, env_data in data.get("environments", {}).items()
    }


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings() -> Settings:
    """Load settings from environment variables.

    Supports both JET_* and legacy camelCase names from .env.
    """
    return Settings(
        api_user=_env("JET_API_USER", "apiUser"),
        secret=_env("JET_SECRET", "secret"),
        merchant_id=_env("JET_MERCHANT_ID", "merchantId"),
        environment=_env("JET_ENVIRONMENT", default="production"),
        timeout=float(_env("JET_TIMEOUT", default="60")),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    project_root = _find_project_root()

    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Config(settings=_load_settings(), environments=_load_environments(project_root))
