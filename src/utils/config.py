"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.

Scoring weights and thresholds are compiled-in constants of
src.scoring and are deliberately not configurable here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Request limits (API boundary)
    MAX_DOCUMENT_CHARS: int = 500_000
    MAX_BATCH_SIZE: int = 50

    # Remote document fetching
    FETCH_TIMEOUT: float = 30.0
    FETCH_MAX_RETRIES: int = 3

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
