# quotealerts/alerts/builder.py
"""
Turn a blockquote whose title was accepted into an alert container.

Resulting structure (default classes):

    <div class="markdown-alert markdown-alert-note">
        <p class="markdown-alert-title">Note</p>
        <p>Body text</p>
    </div>
"""

import logging
from typing import Any, Dict

from bs4 import BeautifulSoup
from bs4.element import Tag

from .config import AlertConfig, as_title_text
from .title import first_paragraph

logger = logging.getLogger(__name__)

# Alerts are rendered as plain containers, not quotations
ALERT_TAG_NAME = "div"


def normalize_display_title(display_title: str) -> str:
    """Upper-case the first character and lower-case everything after it."""
    return display_title[:1].upper() + display_title[1:].lower()


def apply_data(tag: Tag, data: Dict[str, Any]) -> None:
    """Write render metadata ({"name": ..., "attrs": {...}}) onto a tag."""
    tag.name = data.get("name") or tag.name
    tag.attrs = dict(data.get("attrs") or {})


def build_alert(soup: BeautifulSoup, blockquote: Tag, title: str, config: AlertConfig) -> Tag:
    """
    Insert the title paragraph and re-tag the blockquote.

    Args:
        soup: Document the blockquote belongs to, used to create new tags
        blockquote: Blockquote already stripped of its raw title
        title: Raw title accepted by the title filter
        config: Resolved alert configuration

    Returns:
        The title paragraph that was inserted
    """
    display_title, checked_title = as_title_text(config.title_text_map(title))

    title_paragraph = soup.new_tag("p")
    title_paragraph.string = normalize_display_title(display_title)
    apply_data(
        title_paragraph,
        config.data_maps.title(
            {"name": "p", "attrs": {"class": config.class_name_maps.title(checked_title)}}
        ),
    )

    # The marker may have been the only thing in its paragraph
    emptied = first_paragraph(blockquote)
    if emptied is not None and not any(str(child) for child in emptied.contents):
        emptied.decompose()

    blockquote.insert(0, title_paragraph)

    block_data = {
        "name": ALERT_TAG_NAME,
        "attrs": {**blockquote.attrs, "class": config.class_name_maps.block(checked_title)},
    }
    apply_data(blockquote, config.data_maps.block(block_data))

    logger.debug(f"Converted blockquote into alert {checked_title!r}")
    return title_paragraph
