"""Application configuration — loaded from environment variables."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    ``EXTRA_FILES`` may be a JSON array or a comma-separated list.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr | None = None
    github_api_url: str = "https://api.github.com"
    request_timeout: float = 30.0
    extra_files: Annotated[list[str], NoDecode] = []
    max_concurrent_fetches: int = 5
    tolerate_undecodable_files: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("extra_files", mode="before")
    @classmethod
    def _split_extra_files(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        v = v.strip()
        if v.startswith("["):
            return json.loads(v)
        return [name.strip() for name in v.split(",") if name.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
