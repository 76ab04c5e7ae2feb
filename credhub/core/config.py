from __future__ import annotations

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from env and .env file."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    CREDHUB_API_URL: str = "https://localhost:8844"  # CredHub server root, without /api/v1
    CREDHUB_TOKEN: Optional[str] = None  # UAA bearer token, sent as-is

    REQUEST_TIMEOUT_S: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG/INFO/WARNING/ERROR
    CREDHUB_LOG_LEVEL: str = "WARNING"  # level for credhub.support / credhub.services


settings = Settings()
