"""Card rendering module for post-card."""
from .card_renderer import CardRenderer, classify_reference, parse_arguments
from .templates import render_card, render_error_card

__all__ = [
    "CardRenderer",
    "classify_reference",
    "parse_arguments",
    "render_card",
    "render_error_card",
]
