"""
Date utilities for post-card.

Dates found in meta tags come in many shapes; everything is reduced to a
calendar date as soon as it is read, and formatted the same way on every card.
"""

from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Optional, Union

CARD_DATE_FORMAT = "%B %d, %Y"

# Tried in order after ISO 8601
FALLBACK_DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",  # Jekyll front matter
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",  # fromisoformat on 3.10 rejects +0000
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%A, %B %d, %Y",
    "%a, %b %d, %Y",
    "%A, %d %B %Y",
    "%Y%m%d",
    "%d.%m.%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_calendar_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a date string into a calendar date.

    Args:
        value: ISO 8601, RFC 2822 or a common written form such as
            "December 15, 2024"

    Returns:
        The calendar date as written (time and offset are dropped), or None
        if the value cannot be parsed
    """
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    try:
        return parsedate_to_datetime(text).date()
    except (TypeError, ValueError, IndexError):
        return None


def coerce_date(value: Union[date, datetime, str, None]) -> Optional[date]:
    """Reduce a date, datetime or date string to a calendar date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_calendar_date(str(value))


def format_card_date(value: Optional[date]) -> Optional[str]:
    """Format a date the way cards display it, e.g. "January 01, 2024"."""
    if value is None:
        return None
    return value.strftime(CARD_DATE_FORMAT)
