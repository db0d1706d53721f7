"""Configuration management for VendorPulse."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Marketplace API
    api_url: str = Field("", description="Base URL of the marketplace API, e.g. http://host:5000/api")
    api_token: str = Field("", description="Bearer token for the marketplace API")
    request_timeout: float = Field(10.0, description="HTTP timeout in seconds")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Retry settings
    max_retries: int = Field(3, description="Maximum retry attempts")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    # Scoring settings
    lexicon_file: str = Field("", description="Optional YAML file overriding the built-in lexicons")
    default_badge_size: str = Field("medium", description="Badge size used when none is given")

    class Config:
        env_prefix = "VENDORPULSE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
