"""
Centralized configuration for the Carpool backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with CARPOOL_ (e.g., CARPOOL_DEBUG, CARPOOL_PORT).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CARPOOL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Carpool API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Sessions
    session_storage_key: str = "user"
    session_store_path: Optional[str] = None  # JSON file; in-memory when unset

    # Simulated collaborators (seconds)
    simulated_latency_seconds: float = 1.0
    search_latency_seconds: float = 1.5
    request_timeout_seconds: float = 10.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
