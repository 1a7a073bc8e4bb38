"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///db/stpaul_crime.sqlite3"
    init_db_on_startup: bool = False  # Create missing tables instead of failing readiness

    # API settings
    api_prefix: str = ""
    cors_origins: list[str] = ["*"]  # Restrict in production
    rate_limit_per_minute: int = 60
    rate_limit_enabled: bool = True

    # Environment
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
