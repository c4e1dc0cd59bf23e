import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .post_metadata import ErrorKind


class SourceKind(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


class CardData(BaseModel):
    """Fields shared by internal and external cards, ready for rendering."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    image: Optional[str] = None
    url: str = ""
    date: Optional[datetime.date] = None
    source_label: Optional[str] = None
    source_kind: SourceKind = SourceKind.INTERNAL

    @property
    def is_external(self) -> bool:
        return self.source_kind is SourceKind.EXTERNAL


class CardFailure(BaseModel):
    """A card that could not be built; rendered as the error card."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
