"""12-factor configuration adapter using environment variables."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "static"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Collector configuration
    collector_url: str = Field(
        default="http://www.google-analytics.com/collect",
        description="Measurement Protocol collection endpoint hits are posted to",
    )
    collector_timeout_seconds: float = Field(
        default=5.0, description="Total timeout for one collector request in seconds"
    )

    # Request handling
    static_dir: Path = Field(
        default=DEFAULT_STATIC_DIR,
        description="Directory holding the pixel and badge images",
    )
    trust_forwarded_for: bool = Field(
        default=False,
        description="Take the client IP from the first X-Forwarded-For entry (behind a proxy)",
    )
    enforce_https: bool = Field(
        default=False,
        description="Redirect plain HTTP to HTTPS and send Strict-Transport-Security",
    )
    hsts_max_age_seconds: int = Field(
        default=2592000, description="max-age for the Strict-Transport-Security header"
    )

    @field_validator("collector_timeout_seconds")
    @classmethod
    def validate_collector_timeout(cls, v: float) -> float:
        """Validate the collector timeout is positive."""
        if v <= 0:
            raise ValueError("collector_timeout_seconds must be greater than 0")
        return v

    @field_validator("collector_url")
    @classmethod
    def validate_collector_url(cls, v: str) -> str:
        """Validate the collector URL is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("collector_url must start with http:// or https://")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()
