"""
HTML skeletons for post cards.

The markup is fixed; only escaped values are substituted. The link overlay
is the last child of `.post-card-inner`, after the image and content blocks,
so it never wraps an image (lightbox and zoom scripts keep working).
"""

from typing import List, Optional

from post_card.models import ERROR_TITLE, CardData, RenderOptions, Variant
from post_card.utils import TextUtils, format_card_date

ARROW_ICON = (
    '<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round"><path d="M5 12h14M12 5l7 7-7 7"/></svg>'
)
INTERNAL_ICON = (
    '<svg viewBox="0 0 24 24" fill="currentColor">'
    '<path d="M19 21l-7-5-7 5V5a2 2 0 012-2h10a2 2 0 012 2z"/></svg>'
)
EXTERNAL_ICON = (
    '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M12 2C6.48 2 2 6.48 2 12s4.48 '
    "10 10 10 10-4.48 10-10S17.52 2 12 2zm-1 17.93c-3.95-.49-7-3.85-7-7.93 0-.62.08-1.21"
    ".21-1.79L9 15v1c0 1.1.9 2 2 2v1.93zm6.9-2.54c-.26-.81-1-1.39-1.9-1.39h-1v-3c0-.55-.45"
    "-1-1-1H8v-2h2c.55 0 1-.45 1-1V7h2c1.1 0 2-.9 2-2v-.41c2.93 1.19 5 4.06 5 7.41 0 2.08"
    '-.8 3.97-2.1 5.39z"/></svg>'
)
PLACEHOLDER_ICON = (
    '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M19 3H5c-1.1 0-2 .9-2 2v14c0 '
    "1.1.9 2 2 2h14c1.1 0 2-.9 2-2V5c0-1.1-.9-2-2-2zm-1 16H6c-.55 0-1-.45-1-1V6c0-.55.45-1 "
    "1-1h12c.55 0 1 .45 1 1v12c0 .55-.45 1-1 1zm-4.44-6.19l-2.35 3.02-1.56-1.88c-.2-.25-.58"
    "-.24-.78.01l-1.74 2.23c-.26.33-.02.81.39.81h8.98c.41 0 .65-.47.4-.8l-2.55-3.39c-.19-.26"
    '-.59-.26-.79 0z"/></svg>'
)
ERROR_ICON = (
    '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M12 2C6.48 2 2 6.48 2 12s4.48 '
    '10 10 10 10-4.48 10-10S17.52 2 12 2zm1 15h-2v-2h2v2zm0-4h-2V7h2v6z"/></svg>'
)
ERROR_BADGE_STYLE = "background: rgba(255, 100, 100, 0.15); color: #ff6b6b;"


def _indent(lines: List[str], depth: int) -> List[str]:
    pad = "  " * depth
    return [pad + line for line in lines]


def card_classes(card: CardData, options: RenderOptions) -> str:
    """Class list for the card root element."""
    classes = ["post-card"]
    if options.variant is not Variant.DEFAULT:
        classes.append(options.variant.value)
    if card.is_external:
        classes.append("external")
    show_image = card.image is not None and not options.hide_image
    if not show_image:
        classes.append("no-image")
    return " ".join(classes)


def render_image_block(image: Optional[str], alt: str) -> List[str]:
    """The image slot: the image itself, or a placeholder graphic when there is none."""
    if image is not None:
        inner = (
            f'<img src="{TextUtils.escape_html(image)}" alt="{TextUtils.escape_html(alt)}" '
            'class="post-card-image" loading="lazy">'
        )
    else:
        inner = f'<div class="post-card-placeholder">{PLACEHOLDER_ICON}</div>'
    return [
        '<div class="post-card-image-container">',
        f"  {inner}",
        "</div>",
    ]


def render_card(card: CardData, options: RenderOptions) -> str:
    """Render a card for a resolved document or page."""
    escaped_url = TextUtils.escape_html(card.url)
    formatted_date = format_card_date(card.date)

    if card.is_external:
        icon = EXTERNAL_ICON
        link_attrs = 'target="_blank" rel="noopener noreferrer"'
    else:
        icon = INTERNAL_ICON
        link_attrs = 'target="_self"'

    meta = [
        '<div class="post-card-meta">',
        '  <span class="post-card-source">',
        f"    {icon}",
        f"    {TextUtils.escape_html(card.source_label)}",
        "  </span>",
    ]
    if formatted_date:
        meta.append(f'  <span class="post-card-date">{formatted_date}</span>')
    meta.append("</div>")

    inner: List[str] = []
    # hide_image drops the slot; a missing image keeps it with a placeholder
    if not options.hide_image:
        inner.extend(render_image_block(card.image, card.title))
    inner.append('<div class="post-card-content">')
    inner.extend(_indent(meta, 1))
    inner.append(f'  <h3 class="post-card-title">{TextUtils.escape_html(card.title)}</h3>')
    inner.append(
        f'  <p class="post-card-excerpt">{TextUtils.escape_html(card.description)}</p>'
    )
    inner.append("</div>")
    inner.append(f'<div class="post-card-arrow">{ARROW_ICON}</div>')
    inner.append(f'<a href="{escaped_url}" class="post-card-link" {link_attrs}></a>')

    lines = [
        f'<div class="{card_classes(card, options)}" data-url="{escaped_url}">',
        '  <div class="post-card-inner">',
        *_indent(inner, 2),
        "  </div>",
        "</div>",
    ]
    return "\n".join(lines) + "\n"


def render_error_card(message: str) -> str:
    """Render the fixed error card; always in the no-image state."""
    lines = [
        '<div class="post-card error no-image">',
        '  <div class="post-card-inner">',
        '    <div class="post-card-image-container">',
        f'      <div class="post-card-placeholder">{ERROR_ICON}</div>',
        "    </div>",
        '    <div class="post-card-content">',
        '      <div class="post-card-meta">',
        f'        <span class="post-card-source" style="{ERROR_BADGE_STYLE}">',
        f"          {ERROR_ICON}",
        "          Error",
        "        </span>",
        "      </div>",
        f'      <h3 class="post-card-title">{ERROR_TITLE}</h3>',
        f'      <p class="post-card-excerpt">{TextUtils.escape_html(message)}</p>',
        "    </div>",
        "  </div>",
        "</div>",
    ]
    return "\n".join(lines) + "\n"
