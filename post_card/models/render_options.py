from enum import Enum
from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict

TRUTHY_VALUES = {"true", "yes", "1"}


class Variant(str, Enum):
    """Card layouts understood by the stylesheet."""

    DEFAULT = "default"
    COMPACT = "compact"
    VERTICAL = "vertical"


def parse_option_tokens(tokens) -> Dict[str, str]:
    """
    Collect `key:value` tokens into a dict.

    Tokens without a colon are ignored; the value keeps anything after the
    first colon, so `key:a:b` maps `key` to `a:b`.
    """
    options: Dict[str, str] = {}
    for token in tokens:
        if ":" not in token:
            continue
        key, value = token.split(":", 1)
        options[key] = value
    return options


class RenderOptions(BaseModel):
    """Display options for a single card."""

    model_config = ConfigDict(frozen=True)

    variant: Variant = Variant.DEFAULT
    hide_image: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, str]) -> "RenderOptions":
        """Build options from raw strings; unknown keys and variants fall back to defaults."""
        raw_variant = options.get("variant") or Variant.DEFAULT.value
        try:
            variant = Variant(raw_variant)
        except ValueError:
            variant = Variant.DEFAULT

        hide_image = (options.get("hide_image") or "").lower() in TRUTHY_VALUES
        return cls(variant=variant, hide_image=hide_image)

    @classmethod
    def parse(cls, options_string: str) -> "RenderOptions":
        """Parse a whitespace separated `key:value` string."""
        return cls.from_mapping(parse_option_tokens((options_string or "").split()))
