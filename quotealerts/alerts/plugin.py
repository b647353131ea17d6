# quotealerts/alerts/plugin.py
"""
Entry point of the alert transform.

Usage:

    transform = alert_transform(MKDOCS_CONFIG)
    soup = BeautifulSoup(html, "html.parser")
    transform(soup)

The configuration is merged and frozen when alert_transform() is called, the
returned function can then be applied to any number of documents.
"""

import logging
from typing import Any, Callable, Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

from quotealerts.exceptions import AlertConfigError

from .builder import build_alert
from .config import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FOR_LEGACY_TITLE,
    AlertConfig,
    merge_fragments,
    resolve_config,
)
from .title import extract_title, is_tag

logger = logging.getLogger(__name__)


class TitleStrategy(Protocol):
    """Converts one node in place, returning whether it became an alert."""

    def __call__(self, soup: BeautifulSoup, node: Tag, config: AlertConfig) -> bool: ...


def handle_node(soup: BeautifulSoup, node: Tag, config: AlertConfig) -> bool:
    """
    Convert a single blockquote into an alert if its first line is a title.

    Nodes that do not qualify are left exactly as they were.
    """
    if not is_tag(node, "blockquote"):
        return False

    title = extract_title(node, config)
    if title is None:
        return False

    build_alert(soup, node, title, config)
    return True


def alert_transform(
    *fragments: Any, legacy_strategy: Optional[TitleStrategy] = None
) -> Callable[[BeautifulSoup], int]:
    """
    Build the per-document alert transform.

    Args:
        *fragments: Partial configurations, later ones override earlier ones
        legacy_strategy: Handler used instead of handle_node when the merged
            configuration sets legacy_title

    Returns:
        A function that converts the alerts of a parsed document in place and
        returns how many blockquotes were converted

    Raises:
        AlertConfigError: If the configuration is invalid
    """
    provided = merge_fragments(fragments)

    if provided.get("legacy_title", DEFAULT_CONFIG.legacy_title):
        if legacy_strategy is None:
            raise AlertConfigError("legacy_title is set but no legacy title strategy was given")
        config = resolve_config(provided, DEFAULT_CONFIG_FOR_LEGACY_TITLE)
        handler = legacy_strategy
    else:
        config = resolve_config(provided, DEFAULT_CONFIG)
        handler = handle_node

    def transform(soup: BeautifulSoup) -> int:
        converted = 0
        # find_all() returns a snapshot, so re-tagging does not disturb the walk
        for node in soup.find_all("blockquote"):
            if handler(soup, node, config):
                converted += 1
        if converted:
            logger.debug(f"Converted {converted} blockquote(s) into alerts")
        return converted

    transform.config = config
    return transform
