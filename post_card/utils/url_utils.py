import re
from urllib.parse import ParseResult, urljoin, urlparse

from post_card.core.exceptions import InvalidUrlError

# Safe schemes only
SAFE_SCHEMES = {"http", "https"}

EXTERNAL_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


class URLUtils:

    @staticmethod
    def is_external_reference(reference: str) -> bool:
        """True when the reference is an absolute http(s) URL."""
        return bool(reference) and bool(EXTERNAL_URL_RE.match(reference))

    @staticmethod
    def validate_url(url: str) -> ParseResult:
        """
        Parse a URL that is about to be fetched.

        Raises:
            InvalidUrlError: if the URL is unparseable, not http(s), or has no host
        """
        if not isinstance(url, str):
            raise InvalidUrlError("Invalid URL: expected a string", context=url)
        if re.search(r"\s", url.strip()):
            raise InvalidUrlError("Invalid URL: contains whitespace", context=url)

        try:
            parsed = urlparse(url.strip())
            host = parsed.hostname
        except ValueError as e:
            raise InvalidUrlError(f"Invalid URL: {e}", context=url) from e

        if parsed.scheme.lower() not in SAFE_SCHEMES:
            raise InvalidUrlError("Invalid URL scheme", context=url)
        if not host:
            raise InvalidUrlError("Missing host", context=url)
        return parsed

    @staticmethod
    def is_absolute(url: str) -> bool:
        return bool(urlparse(url).scheme)

    @staticmethod
    def resolve(base_url: str, reference: str) -> str:
        """
        Resolve `reference` against `base_url` unless it is already absolute.

        A reference that cannot be parsed is returned unchanged.
        """
        try:
            if URLUtils.is_absolute(reference):
                return reference
            return urljoin(base_url, reference)
        except ValueError:
            return reference

    @staticmethod
    def site_name_from_host(url: str) -> str:
        """Host of the URL with a leading `www.` removed."""
        host = urlparse(url).hostname or ""
        return re.sub(r"^www\.", "", host)
