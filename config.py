"""
Configuration management for the Webdock API client

Values are read from WEBDOCK_* environment variables or a .env file.
Arguments passed to APIClient always take precedence.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class WebdockConfig(BaseSettings):
    """Client configuration with environment variable support."""

    # API settings
    api_token: str = ""
    base_url: str = "https://api.webdock.io/v1"
    client_identifier: str = "webdock-python-sdk/v1.0.0"
    default_timeout: Optional[float] = None  # seconds; None keeps aiohttp's default

    # Application settings
    log_level: str = "INFO"
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_prefix="WEBDOCK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None

def get_config() -> WebdockConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = WebdockConfig()
    return _config
