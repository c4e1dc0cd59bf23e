"""Metadata scraping module for post-card."""
from .metadata_extractor import (
    MetadataExtractor,
    extract_metadata,
    get_metadata_extractor,
)

__all__ = [
    "MetadataExtractor",
    "extract_metadata",
    "get_metadata_extractor",
]
