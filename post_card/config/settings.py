"""
Configuration settings for post-card.

Uses pydantic-settings for configuration management with environment
variable support and validation.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from post_card import __version__


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Fetch Configuration
    connect_timeout: float = Field(
        default=10.0, description="Connect timeout per request, in seconds"
    )
    read_timeout: float = Field(
        default=10.0, description="Read timeout per request, in seconds"
    )
    max_redirects: int = Field(
        default=5, description="Maximum number of redirects followed per fetch"
    )
    user_agent: str = Field(
        default=f"post-card/{__version__} (+https://pypi.org/project/post-card/)",
        description="User-Agent sent with every metadata request",
    )

    # Rendering Configuration
    excerpt_length: int = Field(
        default=160, description="Length of excerpts built from document content"
    )
    asset_dir: str = Field(
        default="assets/css",
        description="Directory, relative to the build output, for the stylesheet",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json or text)")
    log_file: Optional[str] = Field(default=None, description="Optional log file")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("max_redirects")
    @classmethod
    def _non_negative_redirects(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_redirects must be >= 0")
        return value

    model_config = SettingsConfigDict(
        env_prefix="POST_CARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
