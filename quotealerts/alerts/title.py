# quotealerts/alerts/title.py
"""
Locate and remove the alert title from the start of a blockquote.

GitHub requires a line break right after the marker. In the rendered tree
that break shows up in one of two ways:

    <blockquote><p>[!NOTE]
    Body text</p></blockquote>          (soft break kept as a newline)

    <blockquote><p>[!NOTE]<br/>
    Body text</p></blockquote>          (hard break)

    <blockquote><p>[!NOTE]</p>
    <p>Body text</p></blockquote>       (marker alone in its paragraph)

The first case is handled by splitting the text at the newline. In the other
two the marker text has to be the whole paragraph, optionally followed by a
single <br>.
"""

import re
from typing import List, Optional, Union

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .config import AlertConfig

# Whitespace GFM ignores at the end of a line
_TRAILING_WHITESPACE_RE = re.compile(r"[ \t\v\f\r]+$")


def is_text(node: Optional[PageElement]) -> bool:
    # Comments, CDATA and friends are strings too, but not text
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_tag(node: Optional[PageElement], name: str) -> bool:
    return isinstance(node, Tag) and node.name == name


def block_children(tag: Tag) -> List[Union[Tag, NavigableString]]:
    """Children of a block container, skipping whitespace between elements."""
    return [child for child in tag.contents if not (is_text(child) and not child.strip())]


def first_paragraph(blockquote: Tag) -> Optional[Tag]:
    children = block_children(blockquote)
    if children and is_tag(children[0], "p"):
        return children[0]
    return None


def extract_title(blockquote: Tag, config: AlertConfig) -> Optional[str]:
    """
    Remove the raw alert title from a blockquote.

    Nothing is modified unless the title is accepted by config.title_filter.

    Args:
        blockquote: The blockquote element
        config: Resolved alert configuration

    Returns:
        The raw title on success, None if the blockquote is not an alert
    """
    paragraph = first_paragraph(blockquote)
    if paragraph is None or not paragraph.contents:
        return None
    text = paragraph.contents[0]
    if not is_text(text):
        return None

    value = str(text)
    title_end = value.find("\n")

    if title_end >= 0:
        title = value[:title_end]
        body = value[title_end + 1 :]
        if not config.title_keep_trailing_whitespace:
            title = _TRAILING_WHITESPACE_RE.sub("", title)
        if not config.title_filter(title):
            return None

        text.replace_with(NavigableString(body))
        return title

    # No newline: the title must be the whole paragraph, bar a trailing <br>
    line_break = None
    if len(paragraph.contents) > 1:
        line_break = paragraph.contents[1]
        if not is_tag(line_break, "br"):
            return None

    title = value
    if not config.title_filter(title):
        return None

    if line_break is not None:
        line_break.extract()
    text.extract()
    return title
