# quotealerts/alerts/presets.py
"""
Ready-made configurations.

GITHUB_CONFIG only accepts the markers github.com renders (NOTE, TIP,
IMPORTANT, WARNING, CAUTION, in any case), keeping the default classes.

MKDOCS_CONFIG reproduces the alert styling of MkDocs Material sites:

    > [!warning "Read this first"]
    > Body text

becomes

    <div class="markdown-alert warning">
        <p class="markdown-alert-title">Read this first</p>
        <p>Body text</p>
    </div>
"""

import re
from typing import List

from .config import TitleText

MKDOCS_KINDS = (
    "attention",
    "caution",
    "danger",
    "error",
    "hint",
    "important",
    "note",
    "tip",
    "warning",
)

_MKDOCS_CLASS_PREFIX = "markdown-alert: "
# Case is ignored so GitHub-style upper-case markers such as [!WARNING] match too
_MKDOCS_TITLE_RE = re.compile(
    r"^\[!(?:%s)(?: \"[^\"]*\")?\]$" % "|".join(MKDOCS_KINDS),
    re.IGNORECASE,
)


def mkdocs_block_classes(checked_title: str) -> List[str]:
    if checked_title.startswith(_MKDOCS_CLASS_PREFIX):
        checked_title = checked_title[len(_MKDOCS_CLASS_PREFIX) :]
    return ["markdown-alert", *checked_title.split(" ")]


def mkdocs_title_filter(title: str) -> bool:
    return _MKDOCS_TITLE_RE.match(title) is not None


def mkdocs_title_text_map(title: str) -> TitleText:
    """Split '[!kind "Label"]' into ("Label", "kind")."""
    title = title[2:-1]
    # ' "' never occurs inside a class name
    i = title.find(' "')
    if i < 0:
        checked_title = title.lower()
        return TitleText(checked_title, checked_title)
    return TitleText(title[i + 2 : -1], title[:i].lower())


MKDOCS_CONFIG = {
    "class_name_maps": {
        "block": mkdocs_block_classes,
        "title": "markdown-alert-title",
    },
    "title_filter": mkdocs_title_filter,
    "title_text_map": mkdocs_title_text_map,
}


GITHUB_KINDS = ("NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION")

# github.com matches the marker in any case: [!note] and [!NOTE] are both alerts
_GITHUB_TITLE_RE = re.compile(r"^\[!(?:%s)\]$" % "|".join(GITHUB_KINDS), re.IGNORECASE)

# The five markers github.com renders; other blockquotes stay quotations
GITHUB_CONFIG = {
    "title_filter": _GITHUB_TITLE_RE,
}
