# quotealerts/markdown/postprocessors/alert_enhancer.py
"""
Postprocessor that turns GitHub-style alert blockquotes into alert containers.

Expected markdown input:
    > [!NOTE]
    > Content of the note.

Pandoc HTML output:
    <blockquote>
    <p>[!NOTE]
    Content of the note.</p>
    </blockquote>

This postprocessor transforms it to:
    <div class="markdown-alert markdown-alert-note">
    <p class="markdown-alert-title">Note</p>
    <p>Content of the note.</p>
    </div>

Blockquotes without a recognised marker are left untouched.
"""

from typing import Callable, Optional

from bs4 import BeautifulSoup

from quotealerts.alerts import GITHUB_CONFIG, alert_transform

# Built once; the configuration is frozen and reused for every document
_DEFAULT_TRANSFORM = alert_transform(GITHUB_CONFIG)


def alert_enhancer(
    html: str,
    context: dict,
    transform: Optional[Callable[[BeautifulSoup], int]] = None,
) -> str:
    """
    Convert alert blockquotes in rendered HTML.

    Args:
        html: HTML string to process
        context: Context dictionary; an "alert_transform" entry (as returned by
            alert_transform()) overrides the default configuration
        transform: Explicit transform, takes precedence over the context

    Returns:
        Processed HTML with alert containers
    """
    transform = transform or context.get("alert_transform") or _DEFAULT_TRANSFORM

    soup = BeautifulSoup(html, "html.parser")
    if not transform(soup):
        return html

    return str(soup)


def alert_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for alert_enhancer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return alert_enhancer(html, context)
