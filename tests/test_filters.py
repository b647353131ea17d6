"""Tests for title filters and class-name maps."""

from __future__ import annotations

import re

import pytest

from quotealerts.alerts.filters import class_name_map, name_filter
from quotealerts.exceptions import AlertConfigError


class TestNameFilter:
    def test_none_matches_everything(self) -> None:
        accept = name_filter(None)
        assert accept("[!NOTE]") is True
        assert accept("") is True

    def test_string_is_exact_match(self) -> None:
        accept = name_filter("[!NOTE]")
        assert accept("[!NOTE]") is True
        assert accept("[!NOTE] ") is False
        assert accept("[!note]") is False

    def test_pattern_is_searched(self) -> None:
        accept = name_filter(re.compile(r"\[!(NOTE|TIP)\]"))
        assert accept("[!TIP]") is True
        assert accept("see [!NOTE] here") is True
        assert accept("[!WARNING]") is False

    def test_collection_is_membership(self) -> None:
        accept = name_filter(["[!NOTE]", "[!TIP]"])
        assert accept("[!TIP]") is True
        assert accept("[!CAUTION]") is False

    def test_predicate_result_is_coerced_to_bool(self) -> None:
        accept = name_filter(lambda title: title.count("!"))
        assert accept("[!NOTE]") is True
        assert accept("[NOTE]") is False

    def test_rejects_unsupported_spec(self) -> None:
        with pytest.raises(AlertConfigError):
            name_filter(42)

    def test_rejects_non_string_entries(self) -> None:
        with pytest.raises(AlertConfigError):
            name_filter(["[!NOTE]", 3])


class TestClassNameMap:
    def test_string_becomes_single_class(self) -> None:
        assert class_name_map("markdown-alert-title")("NOTE") == ["markdown-alert-title"]

    def test_list_keeps_order_and_duplicates(self) -> None:
        classes = class_name_map(["b", "a", "b"])
        assert classes("NOTE") == ["b", "a", "b"]

    def test_list_result_is_a_fresh_copy(self) -> None:
        classes = class_name_map(["a"])
        classes("NOTE").append("mutated")
        assert classes("NOTE") == ["a"]

    def test_callable_receives_checked_title(self) -> None:
        classes = class_name_map(lambda key: ("alert", key.lower()))
        assert classes("TIP") == ["alert", "tip"]

    def test_callable_returning_a_string_gives_one_class(self) -> None:
        classes = class_name_map(lambda key: "alert")
        assert classes("NOTE") == ["alert"]

    def test_rejects_unsupported_spec(self) -> None:
        with pytest.raises(AlertConfigError):
            class_name_map(None)
