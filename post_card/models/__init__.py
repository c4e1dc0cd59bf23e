from .post_metadata import PostMetadata, ErrorKind, ERROR_TITLE, ERROR_CONTENT_TYPE
from .render_options import RenderOptions, Variant, parse_option_tokens
from .card_data import CardData, CardFailure, SourceKind

__all__ = [
    "PostMetadata",
    "ErrorKind",
    "ERROR_TITLE",
    "ERROR_CONTENT_TYPE",
    "RenderOptions",
    "Variant",
    "parse_option_tokens",
    "CardData",
    "CardFailure",
    "SourceKind",
]
