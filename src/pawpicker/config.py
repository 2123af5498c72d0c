# PawPicker settings — env-driven configuration.
# Created: 2026-10-19
#
# Every field can be set with a PAWPICKER_ prefixed environment variable
# (PAWPICKER_SERVER_URL, PAWPICKER_API_TOKEN, ...) or from a local .env file.

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """PawPicker configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PAWPICKER_",
        env_file=".env",
        extra="ignore",
    )

    server_url: str = Field(
        default="http://127.0.0.1:8888/api",
        description="Base URL of the file server; /v1/files/... is appended",
    )
    api_token: str | None = Field(default=None, description="Bearer token for the server")
    request_timeout: float | None = Field(
        default=30.0,
        description="Per-request timeout in seconds (None waits forever)",
    )
    initial_path: str = Field(default="~", description="Where browsing starts")
    log_level: str = Field(default="WARNING", description="CLI log level")

    @classmethod
    def load(cls) -> Settings:
        """Build a fresh settings object from the current environment."""
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached)."""
    return Settings.load()
