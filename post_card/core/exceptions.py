"""
Exceptions for post-card.
Defines the custom exceptions raised inside the metadata extractor and the
non-core plumbing (stylesheet publishing, document loading, CLI).

Usage: from post_card.core.exceptions import PostCardException, FetchError

All exceptions inherit from PostCardException and can include a message and
optional context. None of them escape CardRenderer.render: the extractor turns
them into error records and the renderer into error cards.
"""

from typing import Any, Optional


class PostCardException(Exception):
    """
    Base exception for all post-card errors.
    """

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.context = context


class InvalidUrlError(PostCardException):
    """
    Raised when a URL has a non-http(s) scheme, no host, or cannot be parsed.
    """

    pass


class FetchError(PostCardException):
    """
    Raised for HTTP failures: non-2xx/3xx status, transport errors,
    and redirect chains longer than the configured cap.
    """

    pass


class ConfigurationException(PostCardException):
    """Exception raised for configuration and input file errors."""

    pass


class AssetError(PostCardException):
    """Exception raised when the packaged stylesheet cannot be published."""

    pass
