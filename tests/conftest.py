"""
Pytest configuration and fixtures for post-card tests.

Provides common fixtures and test configuration for all test modules. HTTP is
served by an httpx.MockTransport; tests never reach the network.
"""

import datetime
from typing import Dict, List, Optional, Tuple
from unittest.mock import MagicMock

import httpx
import pytest

from post_card.config.settings import Settings
from post_card.content import ContentIndex, Document
from post_card.rendering import CardRenderer
from post_card.scraping import MetadataExtractor


class StubSite:
    """Routes URLs to canned responses and records every request made."""

    def __init__(self):
        self.routes: Dict[str, Tuple[int, str, Dict[str, str]]] = {}
        self.requests: List[httpx.Request] = []

    def stub(
        self,
        url: str,
        body: str = "",
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        all_headers = {"Content-Type": "text/html"}
        all_headers.update(headers or {})
        self.routes[url] = (status, body, all_headers)

    def redirect(self, url: str, location: str, status: int = 301) -> None:
        self.stub(url, status=status, headers={"Location": location})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            raise httpx.ConnectError("Connection refused", request=request)
        status, body, headers = route
        return httpx.Response(status, text=body, headers=headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def build_html(
    title: str = "Test Title",
    description: str = "Test description",
    image: Optional[str] = None,
    site_name: Optional[str] = None,
) -> str:
    og_image = f'<meta property="og:image" content="{image}">' if image else ""
    og_site = f'<meta property="og:site_name" content="{site_name}">' if site_name else ""
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
      <title>{title}</title>
      <meta property="og:title" content="{title}">
      <meta property="og:description" content="{description}">
      {og_image}
      {og_site}
    </head>
    <body>
      <h1>{title}</h1>
      <p>{description}</p>
    </body>
    </html>
    """


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        connect_timeout=1.0,
        read_timeout=1.0,
        max_redirects=5,
        excerpt_length=160,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_logger():
    """Stands in for a structlog logger so log calls can be asserted."""
    return MagicMock()


@pytest.fixture
def site():
    return StubSite()


@pytest.fixture
def sample_html():
    return build_html


@pytest.fixture
def extractor(test_settings, mock_logger, site):
    return MetadataExtractor(
        settings=test_settings, logger=mock_logger, transport=site.transport
    )


@pytest.fixture
def sample_document():
    return Document(
        url="/2024/01/01/test-post",
        title="Test Post",
        date=datetime.datetime(2024, 1, 1, 9, 30),
        excerpt="This is a test excerpt",
        image="/assets/images/test.jpg",
    )


@pytest.fixture
def content_index(sample_document):
    return ContentIndex([sample_document])


@pytest.fixture
def renderer(extractor, content_index, test_settings, mock_logger):
    return CardRenderer(
        extractor=extractor,
        content_source=content_index,
        settings=test_settings,
        logger=mock_logger,
    )


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test names."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
