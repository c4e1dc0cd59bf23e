from .exceptions import (
    PostCardException,
    InvalidUrlError,
    FetchError,
    ConfigurationException,
    AssetError,
)

__all__ = [
    "PostCardException",
    "InvalidUrlError",
    "FetchError",
    "ConfigurationException",
    "AssetError",
]
