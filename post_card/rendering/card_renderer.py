"""
Card renderer for post-card.

Turns a directive such as `/2024/01/01/my-post variant:compact` or
`https://example.com/article hide_image:yes` into an HTML fragment. Local
references are looked up in the host's content source, absolute http(s)
URLs go through the metadata extractor. Every failure ends in the error
card; `render` never raises.
"""

from typing import Optional, Tuple, Union

from post_card.config import Settings, get_settings, get_service_logger
from post_card.content import Document, LocalContentSource
from post_card.models import (
    CardData,
    CardFailure,
    ErrorKind,
    RenderOptions,
    SourceKind,
    parse_option_tokens,
)
from post_card.scraping import MetadataExtractor, get_metadata_extractor
from post_card.utils import TextUtils, URLUtils, coerce_date

from .templates import render_card, render_error_card

DEFAULT_TITLE = "Untitled"
INTERNAL_LABEL = "Internal"


def parse_arguments(markup: str) -> Tuple[str, RenderOptions]:
    """
    Split directive markup into the reference and its options.

    The first whitespace separated token is the reference; the rest are
    `key:value` options.
    """
    parts = (markup or "").split()
    reference = parts[0] if parts else ""
    return reference, RenderOptions.from_mapping(parse_option_tokens(parts[1:]))


def classify_reference(reference: str) -> SourceKind:
    if URLUtils.is_external_reference(reference):
        return SourceKind.EXTERNAL
    return SourceKind.INTERNAL


class CardRenderer:
    """Renders post cards for internal documents and external pages."""

    def __init__(
        self,
        extractor: Optional[MetadataExtractor] = None,
        content_source: Optional[LocalContentSource] = None,
        settings: Optional[Settings] = None,
        logger=None,
    ):
        self.settings = settings or get_settings()
        self.logger = logger or get_service_logger("CardRenderer")
        self.extractor = extractor or get_metadata_extractor()
        self.content_source = content_source

    def render_directive(
        self, markup: str, content_source: Optional[LocalContentSource] = None
    ) -> str:
        """Render `"<reference> [key:value ...]"`."""
        try:
            reference, options = parse_arguments(markup)
        except Exception as e:
            self.logger.error("Invalid card directive", markup=markup, error=repr(e))
            return render_error_card(f"Error rendering card: {e}")
        return self._render(reference, options, content_source)

    def render(
        self,
        reference: str,
        options_string: str = "",
        content_source: Optional[LocalContentSource] = None,
    ) -> str:
        """
        Render a card for `reference`.

        Args:
            reference: absolute http(s) URL or local document URL
            options_string: whitespace separated `key:value` options
            content_source: overrides the renderer's content source

        Returns:
            HTML fragment, the error card when anything goes wrong
        """
        try:
            options = RenderOptions.parse(options_string)
        except Exception as e:
            self.logger.error("Invalid card options", options=options_string, error=repr(e))
            return render_error_card(f"Error rendering card: {e}")
        return self._render(reference, options, content_source)

    def _render(
        self,
        reference: str,
        options: RenderOptions,
        content_source: Optional[LocalContentSource],
    ) -> str:
        try:
            if classify_reference(reference) is SourceKind.EXTERNAL:
                card = self._external_card(reference)
            else:
                card = self._internal_card(
                    reference, content_source or self.content_source
                )

            if isinstance(card, CardFailure):
                return render_error_card(card.message)
            return render_card(card, options)
        except Exception as e:
            self.logger.error("Error rendering card", reference=reference, error=repr(e))
            return render_error_card(f"Error rendering card: {e}")

    def _internal_card(
        self, reference: str, content_source: Optional[LocalContentSource]
    ) -> Union[CardData, CardFailure]:
        document = None
        if content_source is not None:
            document = content_source.find_by_reference(reference)

        if document is None:
            return CardFailure(
                kind=ErrorKind.NOT_FOUND, message=f"Post not found: {reference}"
            )

        return CardData(
            title=document.title or DEFAULT_TITLE,
            description=self._extract_excerpt(document),
            image=document.image or document.thumbnail or document.og_image,
            url=document.url,
            date=coerce_date(document.date),
            source_label=INTERNAL_LABEL,
            source_kind=SourceKind.INTERNAL,
        )

    def _extract_excerpt(self, document: Document) -> str:
        """Excerpt or description if set, otherwise the start of the content."""
        text = TextUtils.normalize_whitespace(document.excerpt or document.description)
        if text:
            return text
        return TextUtils.excerpt_from_content(
            document.content, self.settings.excerpt_length
        )

    def _external_card(self, reference: str) -> Union[CardData, CardFailure]:
        metadata = self.extractor.extract(reference)

        if metadata.is_error:
            return CardFailure(kind=metadata.error_kind, message=metadata.description)

        return CardData(
            title=metadata.title,
            description=metadata.description,
            image=metadata.image,
            url=metadata.url,
            date=metadata.date,
            source_label=metadata.site_name,
            source_kind=SourceKind.EXTERNAL,
        )
