"""Configuration management for the FPL Transfer Recommender."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=3000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Starlette debug mode")

    # FPL API
    fpl_api_base: str = Field(
        default="https://fantasy.premierleague.com/api",
        description="Base URL of the public FPL API",
    )
    fpl_user_agent: str = Field(default="Mozilla/5.0", description="User agent for FPL API")
    http_timeout: float = Field(default=20.0, description="Upstream request timeout in seconds")

    # Cache
    cache_ttl_seconds: int = Field(default=300, description="Lifetime of cached upstream data")

    # Fixtures view
    default_weeks: int = Field(default=6, description="Gameweeks shown when ?weeks is not given")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
