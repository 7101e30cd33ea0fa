"""Client Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The API key comes from the environment or an explicit argument (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - api_url never ends with "/" (endpoint paths are appended as "/<method>")

Design Decisions:
    - CENTRIFUGO_ env prefix: CENTRIFUGO_API_URL, CENTRIFUGO_API_KEY, ...
    - Defaults for all non-secret settings: works against a local Centrifugo out of the box
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centrifugo client settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CENTRIFUGO_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Server
    api_url: str = "http://localhost:8000/api"
    api_key: SecretStr = SecretStr("")
    timeout_seconds: float = Field(10.0, gt=0)

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_url must be an http(s) URL")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
