"""
Link metadata extractor for post-card.

Uses httpx and BeautifulSoup to fetch a single page and describe it from its
Open Graph, Twitter Card and generic HTML meta tags.
"""

from typing import List, Optional, Tuple

import httpx
from bs4 import BeautifulSoup

from post_card.config import Settings, get_settings, get_service_logger
from post_card.core.exceptions import FetchError, InvalidUrlError
from post_card.models import ErrorKind, PostMetadata
from post_card.utils import URLUtils, parse_calendar_date

ACCEPT_HEADER = "text/html,application/xhtml+xml"
DEFAULT_TITLE = "Untitled"
DEFAULT_CONTENT_TYPE = "article"
ERROR_PREFIX = "Could not fetch metadata"
UNEXPECTED_REASON = "Unexpected error occurred"

# (CSS selector, attribute); attribute None means the element text
Selector = Tuple[str, Optional[str]]

TITLE_SELECTORS: List[Selector] = [
    ('meta[property="og:title"]', "content"),
    ('meta[name="twitter:title"]', "content"),
    ("title", None),
]

DESCRIPTION_SELECTORS: List[Selector] = [
    ('meta[property="og:description"]', "content"),
    ('meta[name="twitter:description"]', "content"),
    ('meta[name="description"]', "content"),
]

IMAGE_SELECTORS: List[Selector] = [
    ('meta[property="og:image"]', "content"),
    ('meta[name="twitter:image"]', "content"),
]

SITE_NAME_SELECTORS: List[Selector] = [
    ('meta[property="og:site_name"]', "content"),
]

DATE_SELECTORS: List[Selector] = [
    ('meta[property="article:published_time"]', "content"),
    ('meta[name="date"]', "content"),
    ('meta[name="DC.date"]', "content"),
    ('meta[name="publish-date"]', "content"),
    ("time[datetime]", "datetime"),
]

AUTHOR_SELECTORS: List[Selector] = [
    ('meta[property="article:author"]', "content"),
    ('meta[name="author"]', "content"),
    ('meta[name="DC.creator"]', "content"),
    ('meta[name="twitter:creator"]', "content"),
]

TYPE_SELECTORS: List[Selector] = [
    ('meta[property="og:type"]', "content"),
]


class MetadataExtractor:
    """
    Fetches one page and extracts a normalized PostMetadata record.

    `extract` never raises: invalid URLs and HTTP failures become error
    records with the reason in the description, anything else becomes an
    error record with a generic description.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        logger=None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            settings: timeouts, redirect cap and User-Agent
            logger: structlog-style logger; defaults to the service logger
            transport: httpx transport, e.g. httpx.MockTransport in tests
        """
        self.settings = settings or get_settings()
        self.logger = logger or get_service_logger("MetadataExtractor")
        self.transport = transport

        self.headers = {
            "User-Agent": self.settings.user_agent,
            "Accept": ACCEPT_HEADER,
        }
        # Fresh budget for every hop of a redirect chain
        self.timeout = httpx.Timeout(
            self.settings.read_timeout,
            connect=self.settings.connect_timeout,
            read=self.settings.read_timeout,
        )

    def extract(self, url: str) -> PostMetadata:
        """
        Fetch `url` and describe it.

        Args:
            url: absolute http(s) URL

        Returns:
            PostMetadata; `is_error` is set when the page could not be loaded
        """
        try:
            URLUtils.validate_url(url)
            html, document_url = self._fetch_html(url)
            return self.parse_metadata(html, url, document_url)
        except (InvalidUrlError, FetchError) as e:
            self.logger.warning("Failed to fetch metadata", url=url, reason=e.message)
            kind = (
                ErrorKind.INVALID_URL
                if isinstance(e, InvalidUrlError)
                else ErrorKind.FETCH_FAILURE
            )
            return PostMetadata.error(url, f"{ERROR_PREFIX}: {e.message}", kind)
        except Exception as e:
            self.logger.error(
                "Unexpected error fetching metadata", url=url, error=repr(e)
            )
            return PostMetadata.error(
                url, f"{ERROR_PREFIX}: {UNEXPECTED_REASON}", ErrorKind.UNEXPECTED
            )

    def _fetch_html(self, url: str) -> Tuple[bytes, str]:
        """
        GET `url`, following up to `max_redirects` redirects by hand.

        Returns:
            (body, url the body was served from)

        Raises:
            FetchError: on non-2xx/3xx status, transport failure, or too many redirects
        """
        current = url
        for _ in range(self.settings.max_redirects + 1):
            response = self._get(current)

            if response.is_success:
                return response.content, current

            if 300 <= response.status_code < 400:
                location = response.headers.get("location")
                if not location:
                    raise FetchError(
                        f"HTTP {response.status_code}: redirect without Location header",
                        context=current,
                    )
                # Relative Location headers resolve against the URL just requested
                current = URLUtils.resolve(current, location)
                self.logger.debug("Following redirect", url=url, location=current)
                continue

            raise FetchError(
                f"HTTP {response.status_code}: {response.reason_phrase}",
                context=current,
            )

        raise FetchError(
            f"Too many redirects (limit {self.settings.max_redirects})", context=url
        )

    def _get(self, url: str) -> httpx.Response:
        try:
            with httpx.Client(
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=False,
                transport=self.transport,
            ) as client:
                return client.get(url)
        except httpx.InvalidURL as e:
            raise InvalidUrlError(f"Invalid URL: {e}", context=url) from e
        except httpx.TransportError as e:
            raise FetchError(str(e) or type(e).__name__, context=url) from e

    def parse_metadata(
        self, html, url: str, document_url: Optional[str] = None
    ) -> PostMetadata:
        """
        Extract metadata from an HTML document.

        Args:
            html: page source (str or bytes)
            url: URL the card links to; also the source of the fallback site name
            document_url: URL the HTML was served from, used to resolve
                relative image paths; defaults to `url`
        """
        soup = BeautifulSoup(html, "html.parser")
        document_url = document_url or url

        return PostMetadata(
            title=self._extract_title(soup),
            description=self._extract_description(soup),
            image=self._extract_image(soup, document_url),
            url=url,
            site_name=self._extract_site_name(soup, url),
            date=self._extract_date(soup),
            author=self._extract_author(soup),
            content_type=self._extract_type(soup),
        )

    @staticmethod
    def _value(soup: BeautifulSoup, selector: Selector) -> Optional[str]:
        css, attribute = selector
        element = soup.select_one(css)
        if element is None:
            return None
        if attribute is None:
            return element.get_text()
        return element.get(attribute)

    def _first_present(
        self, soup: BeautifulSoup, selectors: List[Selector]
    ) -> Optional[str]:
        """First selector whose element and attribute exist and are not blank."""
        for selector in selectors:
            value = self._value(soup, selector)
            if value is not None and value.strip():
                return value
        return None

    def _extract_title(self, soup: BeautifulSoup) -> str:
        return (self._first_present(soup, TITLE_SELECTORS) or DEFAULT_TITLE).strip()

    def _extract_description(self, soup: BeautifulSoup) -> str:
        return (self._first_present(soup, DESCRIPTION_SELECTORS) or "").strip()

    def _extract_image(self, soup: BeautifulSoup, base_url: str) -> Optional[str]:
        image_url = self._first_present(soup, IMAGE_SELECTORS)
        if image_url is None:
            return None
        return URLUtils.resolve(base_url, image_url.strip())

    def _extract_site_name(self, soup: BeautifulSoup, url: str) -> str:
        site_name = self._first_present(soup, SITE_NAME_SELECTORS)
        if site_name is not None:
            return site_name.strip()
        return URLUtils.site_name_from_host(url)

    def _extract_date(self, soup: BeautifulSoup):
        """First candidate that parses as a date; unparseable ones are skipped."""
        for selector in DATE_SELECTORS:
            parsed = parse_calendar_date(self._value(soup, selector))
            if parsed is not None:
                return parsed
        return None

    def _extract_author(self, soup: BeautifulSoup) -> Optional[str]:
        for selector in AUTHOR_SELECTORS:
            author = (self._value(soup, selector) or "").strip()
            if author:
                return author
        return None

    def _extract_type(self, soup: BeautifulSoup) -> str:
        return self._first_present(soup, TYPE_SELECTORS) or DEFAULT_CONTENT_TYPE


# Global extractor instance
metadata_extractor = MetadataExtractor()


def get_metadata_extractor() -> MetadataExtractor:
    return metadata_extractor


def extract_metadata(url: str) -> PostMetadata:
    """Extract metadata for `url` with the global extractor."""
    return metadata_extractor.extract(url)
