"""
This module handles the text and HTML helpers used when building cards.
"""

import html
import re
from typing import Optional

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")

ELLIPSIS = "..."


class TextUtils:
    """
    This class handles escaping, tag stripping and excerpt building.
    """

    @staticmethod
    def escape_html(text: Optional[object]) -> str:
        """
        Escape &, <, >, " and ' for use in element text or attribute values.

        None renders as an empty string.
        """
        if text is None:
            return ""
        return html.escape(str(text), quote=True)

    @staticmethod
    def normalize_whitespace(text: Optional[str]) -> str:
        if not text:
            return ""
        return _WHITESPACE_RE.sub(" ", text).strip()

    @staticmethod
    def strip_tags(text: Optional[str]) -> str:
        """Replace every tag with a space and collapse the whitespace left behind."""
        if not text:
            return ""
        return TextUtils.normalize_whitespace(_TAG_RE.sub(" ", text))

    @staticmethod
    def excerpt_from_content(content: Optional[str], length: int = 160) -> str:
        """
        Build a plain-text excerpt of at most `length` characters.

        Longer text is cut to leave room for a trailing ellipsis.
        """
        text = TextUtils.strip_tags(content)
        if len(text) <= length:
            return text
        return text[: max(length - len(ELLIPSIS), 0)] + ELLIPSIS
