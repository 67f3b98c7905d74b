"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str
    # Upper bound for a single storage query, in seconds
    query_timeout_seconds: float = 5.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @field_validator("query_timeout_seconds")
    @classmethod
    def check_query_timeout(cls, v: float) -> float:
        """Reject non-positive timeouts."""
        if v <= 0:
            raise ValueError("query_timeout_seconds must be positive")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level names to upper case."""
        return str(v).strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
