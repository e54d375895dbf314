"""Configuration management for the Boosty client.

Loads API location and credentials from environment variables (and a
project-level .env file).
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from boosty_api.models.auth import CredentialMode, RefreshCredentials, StaticCredentials
from boosty_api.utils.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.boosty.to"


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Boosty API root, without /v1")
    access_token: str = Field(default="", description="Static bearer token")
    refresh_token: str = Field(default="", description="OAuth refresh token")
    device_id: str = Field(default="", description="Device id paired with the refresh token")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    page_size: int = Field(default=20, description="Items requested per page when paginating")


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings

    @property
    def base_url(self) -> str:
        return self.settings.base_url.rstrip("/")

    def initial_credentials(self) -> CredentialMode:
        """Credential mode described by the settings, or None when nothing is configured.

        Raises:
            ConfigurationError: If both a static token and refresh credentials are
                set, or only one of refresh token / device id is set.
        """
        s = self.settings
        has_refresh = bool(s.refresh_token or s.device_id)
        if s.access_token and has_refresh:
            raise ConfigurationError(
                "Set either BOOSTY_ACCESS_TOKEN or BOOSTY_REFRESH_TOKEN + BOOSTY_DEVICE_ID, not both"
            )
        if s.access_token:
            return StaticCredentials(access_token=s.access_token)
        if has_refresh:
            if not (s.refresh_token and s.device_id):
                raise ConfigurationError(
                    "BOOSTY_REFRESH_TOKEN and BOOSTY_DEVICE_ID must be set together"
                )
            return RefreshCredentials(refresh_token=s.refresh_token, device_id=s.device_id)
        return None


def _find_project_root() -> Path:
    """Walk up from the current directory to the first one holding a .env file."""
    current = Path.cwd().resolve()
    for parent in [current, *current.parents]:
        if (parent / ".env").exists():
            return parent
    return current


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        base_url=_env("BOOSTY_BASE_URL", "BOOSTY_API_URL", default=DEFAULT_BASE_URL),
        access_token=_env("BOOSTY_ACCESS_TOKEN"),
        refresh_token=_env("BOOSTY_REFRESH_TOKEN"),
        device_id=_env("BOOSTY_DEVICE_ID"),
        timeout=float(_env("BOOSTY_TIMEOUT", default="30")),
        page_size=int(_env("BOOSTY_PAGE_SIZE", default="20")),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    env_path = _find_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Config(settings=_load_settings())
