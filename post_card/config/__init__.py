"""Configuration module for post-card."""
from .settings import Settings, get_settings
from .logging_config import (
    get_service_logger,
    get_logger,
    setup_logging,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_service_logger",
    "get_logger",
    "setup_logging",
]
