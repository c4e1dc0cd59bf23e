"""
Local content lookup for internal cards.

The host site owns its documents; the renderer only needs a way to find one
by the reference written in the directive. ContentIndex is the in-memory
implementation used by the CLI and the tests.
"""

import datetime
import json
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from post_card.core.exceptions import ConfigurationException
from post_card.utils import coerce_date


class Document(BaseModel):
    """A local document as exposed by the host site."""

    model_config = ConfigDict(extra="ignore")

    url: str
    title: Optional[str] = None
    excerpt: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    og_image: Optional[str] = None
    date: Optional[Union[datetime.datetime, datetime.date]] = None
    content: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _parse_front_matter_date(cls, value):
        # Front matter writes dates like "2024-01-01 10:00:00 +0100"
        if isinstance(value, str):
            return coerce_date(value) or value
        return value


class LocalContentSource(Protocol):
    def find_by_reference(self, reference: str) -> Optional[Document]:
        ...


class ContentIndex:
    """
    Finds documents by the reference used in a directive.

    A document matches when its URL equals the reference, the reference with
    a leading slash added, or the reference with one trailing slash removed.
    """

    def __init__(self, documents: Optional[Iterable[Document]] = None):
        self.documents: List[Document] = list(documents or [])

    def add(self, document: Document) -> None:
        self.documents.append(document)

    def find_by_reference(self, reference: str) -> Optional[Document]:
        without_slash = reference[:-1] if reference.endswith("/") else reference
        candidates = (reference, f"/{reference}", without_slash)
        for document in self.documents:
            if document.url in candidates:
                return document
        return None

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ContentIndex":
        """
        Load documents from a JSON file holding a list of objects.

        Raises:
            ConfigurationException: if the file is missing, not JSON, or a
                document is malformed
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationException(f"Cannot read documents file: {e}", context=str(path)) from e
        except json.JSONDecodeError as e:
            raise ConfigurationException(f"Invalid JSON in documents file: {e}", context=str(path)) from e

        if not isinstance(data, list):
            raise ConfigurationException("Documents file must contain a JSON list", context=str(path))

        try:
            return cls(Document.model_validate(item) for item in data)
        except ValidationError as e:
            raise ConfigurationException(f"Invalid document: {e}", context=str(path)) from e
