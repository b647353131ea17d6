# quotealerts/markdown/renderer.py

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors


def render_markdown(text, context=None):
    """
    Render markdown to HTML with pypandoc, then run the postprocessor pipeline

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data.
            "hard_line_breaks" switches the pandoc extension on,
            "alert_transform" replaces the default alert transform.
    """
    context = context or {}

    pandoc_config = get_pandoc_config(
        hard_line_breaks=context.get("hard_line_breaks", False)
    )

    html = pypandoc.convert_text(
        text,
        to="html5",
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html
