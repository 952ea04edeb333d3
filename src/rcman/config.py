# Application settings loaded from the environment.
# Created: 2026-10-18
#
# Every field can be overridden with an RCMAN_-prefixed environment variable
# (e.g. RCMAN_RCLONE_API_PORT=5573) or a .env file in the working directory.

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """rcman configuration."""

    model_config = SettingsConfigDict(env_prefix="RCMAN_", env_file=".env", extra="ignore")

    # rclone rc daemon
    rclone_api_host: str = "127.0.0.1"
    rclone_api_port: int = Field(5572, ge=1, le=65535)
    rclone_api_url: str | None = None  # full base URL, wins over host/port
    rclone_rc_user: str | None = None
    rclone_rc_pass: str | None = None
    rclone_request_timeout: float = 30.0

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8899
    api_cors_allowed_origins: list[str] = []

    log_level: str = "INFO"

    @property
    def engine_api_url(self) -> str:
        """Base address of the rclone rc API."""
        if self.rclone_api_url:
            return self.rclone_api_url.rstrip("/")
        return f"http://{self.rclone_api_host}:{self.rclone_api_port}"

    @classmethod
    def load(cls) -> Settings:
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, loaded once."""
    return Settings.load()
