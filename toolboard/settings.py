"""Application settings."""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    # Environment
    ENV: Literal["dev", "staging", "prod"] = "dev"

    # Database (favorites persistence)
    DATABASE_URL: str = "sqlite:///./toolboard.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"  # JSON for production
    LOG_FILE: Optional[str] = None  # Optional file logging

    # Tools feed
    TOOLS_FEED_URL: str = "https://v0-ai-tools-feed.vercel.app/api/tools/latest"
    FEED_TIMEOUT: float = 15.0  # seconds
    FEED_LOAD_ON_STARTUP: bool = True

    # Liveness probing
    STATUS_PROBE_ENABLED: bool = True
    STATUS_PROBE_TIMEOUT: float = 5.0  # seconds per URL
    STATUS_PROBE_CONCURRENCY: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate DATABASE_URL is provided."""
        if not v:
            raise ValueError(
                "DATABASE_URL is required. "
                "Example: sqlite:///./toolboard.db"
            )
        return v

    @field_validator('TOOLS_FEED_URL')
    @classmethod
    def validate_feed_url(cls, v: str) -> str:
        """Feed must be fetched over http(s)."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"TOOLS_FEED_URL must be an http(s) URL, got {v!r}")
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def validate_required_for_env(self) -> None:
        """
        Validate all required settings for the current environment.

        Raises:
            ValueError: If required settings are missing or invalid
        """
        errors = []

        if self.FEED_TIMEOUT <= 0:
            errors.append("FEED_TIMEOUT must be positive")

        if self.STATUS_PROBE_ENABLED:
            if self.STATUS_PROBE_TIMEOUT <= 0:
                errors.append("STATUS_PROBE_TIMEOUT must be positive")
            if self.STATUS_PROBE_CONCURRENCY < 1:
                errors.append("STATUS_PROBE_CONCURRENCY must be at least 1")

        # Production requirements
        if self.ENV == "prod" and self.is_sqlite:
            errors.append("DATABASE_URL must not point at SQLite in production")

        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton settings instance
settings = Settings()
