"""Utilities module for post-card."""

from .date_parsing import (
    parse_calendar_date,
    coerce_date,
    format_card_date,
)
from .text_utils import TextUtils
from .url_utils import URLUtils

__all__ = [
    "parse_calendar_date",
    "coerce_date",
    "format_card_date",
    "TextUtils",
    "URLUtils",
]
