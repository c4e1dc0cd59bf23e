import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

ERROR_TITLE = "Unable to load post"
ERROR_CONTENT_TYPE = "error"


class ErrorKind(str, Enum):
    """Why a card could not be built."""

    INVALID_URL = "invalid_url"
    FETCH_FAILURE = "fetch_failure"
    UNEXPECTED = "unexpected"
    NOT_FOUND = "not_found"


class PostMetadata(BaseModel):
    """Normalized description of a web page, or of the failure to load one."""

    model_config = ConfigDict(frozen=True)

    title: str = "Untitled"
    description: str = ""
    image: Optional[str] = None
    url: str = ""
    site_name: Optional[str] = None
    date: Optional[datetime.date] = None
    author: Optional[str] = None
    content_type: str = "article"
    error_kind: Optional[ErrorKind] = None

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None

    @classmethod
    def error(cls, url: str, reason: str, kind: ErrorKind) -> "PostMetadata":
        """Build the record returned when extraction fails."""
        return cls(
            title=ERROR_TITLE,
            description=reason,
            url=url,
            content_type=ERROR_CONTENT_TYPE,
            error_kind=kind,
        )
