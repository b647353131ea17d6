# quotealerts/markdown/postprocessors/__init__.py

from .alert_enhancer import alert_enhancer_default

POSTPROCESSORS = [
    alert_enhancer_default,  # Turn [!NOTE]-style blockquotes into alert containers
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
