"""Test setup for quotealerts."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup


def _pandoc_available() -> bool:
    import pypandoc

    try:
        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    Rendering tests shell out to the pandoc binary:
        pytest -m "not pandoc"  # skip them explicitly
    """
    config.addinivalue_line(
        "markers",
        "pandoc: marks tests that need the pandoc binary",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if _pandoc_available():
        return
    skip_pandoc = pytest.mark.skip(reason="pandoc binary not available")
    for item in items:
        if "pandoc" in item.keywords:
            item.add_marker(skip_pandoc)


@pytest.fixture
def make_soup():
    """Parse an HTML fragment the way the postprocessors do."""

    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _make
