# quotealerts/markdown/config.py

PANDOC_EXTENSIONS = [
    "autolink_bare_uris",
    "strikeout",
    "superscript",
    "subscript",
    "task_lists",
    "pipe_tables",
    "fenced_code_blocks",
    "fenced_code_attributes",
    "raw_html",
    "footnotes",
]


def get_pandoc_config(hard_line_breaks=False):
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Alerts are detected after rendering, so the HTML must keep the line break
    that follows an alert marker. "--wrap=preserve" keeps soft breaks as
    newlines in the output; with hard_line_breaks they become <br /> instead.
    Both shapes are recognised by the alert postprocessor.
    """
    extensions = list(PANDOC_EXTENSIONS)
    if hard_line_breaks:
        extensions.append("hard_line_breaks")

    return {
        # smart quotes would break quoted alert labels such as [!tip "Label"]
        "format": "markdown-smart+" + "+".join(extensions),
        "extra_args": [
            "--wrap=preserve",
        ],
    }
