"""Tests for the bundled configurations."""

from __future__ import annotations

import pytest

from quotealerts.alerts import GITHUB_CONFIG, MKDOCS_CONFIG, alert_transform
from quotealerts.alerts.config import TitleText
from quotealerts.alerts.presets import (
    mkdocs_block_classes,
    mkdocs_title_filter,
    mkdocs_title_text_map,
)


class TestMkdocsPreset:
    def test_warning_end_to_end(self, make_soup) -> None:
        soup = make_soup("<blockquote><p>[!WARNING]\nDo not proceed.</p></blockquote>")

        assert alert_transform(MKDOCS_CONFIG)(soup) == 1
        assert soup.blockquote is None
        assert soup.div["class"] == ["markdown-alert", "warning"]
        title_paragraph, body = soup.div.find_all("p")
        assert title_paragraph["class"] == ["markdown-alert-title"]
        assert title_paragraph.string == "Warning"
        assert body.string == "Do not proceed."
        assert "class" not in body.attrs

    def test_quoted_label_becomes_title(self, make_soup) -> None:
        soup = make_soup('<blockquote><p>[!tip "Pro TIP"]\nbody</p></blockquote>')

        alert_transform(MKDOCS_CONFIG)(soup)
        assert soup.div["class"] == ["markdown-alert", "tip"]
        assert soup.div.p.string == "Pro tip"

    @pytest.mark.parametrize(
        ("title", "accepted"),
        [
            ("[!note]", True),
            ("[!NOTE]", True),
            ("[!attention]", True),
            ('[!danger "Hot"]', True),
            ("[!notes]", False),
            ("[!note] trailing", False),
            ("[!custom]", False),
            ("note", False),
        ],
    )
    def test_title_filter(self, title, accepted) -> None:
        assert mkdocs_title_filter(title) is accepted

    def test_title_text_map(self) -> None:
        assert mkdocs_title_text_map("[!Hint]") == TitleText("hint", "hint")
        assert mkdocs_title_text_map('[!note "See also"]') == TitleText("See also", "note")

    def test_block_classes_strip_prefix(self) -> None:
        assert mkdocs_block_classes("note") == ["markdown-alert", "note"]
        assert mkdocs_block_classes("markdown-alert: tip inline") == ["markdown-alert", "tip", "inline"]


class TestGithubPreset:
    def test_only_github_markers_are_converted(self, make_soup) -> None:
        soup = make_soup(
            "<blockquote><p>[!IMPORTANT]\nRead me.</p></blockquote>"
            "<blockquote><p>[!NOTES]\nnot a kind</p></blockquote>"
            "<blockquote><p>A plain quotation.</p></blockquote>"
        )

        assert alert_transform(GITHUB_CONFIG)(soup) == 1
        assert soup.div["class"] == ["markdown-alert", "markdown-alert-important"]
        assert soup.div.p.string == "Important"
        assert len(soup.find_all("blockquote")) == 2

    def test_lower_case_marker_is_accepted(self, make_soup) -> None:
        soup = make_soup("<blockquote><p>[!note]\nlower case</p></blockquote>")

        assert alert_transform(GITHUB_CONFIG)(soup) == 1
        assert soup.div["class"] == ["markdown-alert", "markdown-alert-note"]
        assert soup.div.p.string == "Note"
