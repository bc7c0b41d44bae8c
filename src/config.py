"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority)
2. .env file (for local development fallback)

The recommendation service base URL is intentionally not validated here: an
empty value produces a request to an invalid URL, which the UI reports as a
transport failure.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Recommendation service
    api_base_url: str = ""
    request_timeout: float = 120.0  # 2 minutes for LLM-backed recommendations

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
