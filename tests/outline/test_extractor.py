"""Tests for heading extraction."""

import pytest

from bcoutline.outline.extractor import (
    SymbolKind,
    extract_heading,
    is_heading_candidate,
)


class TestIsHeadingCandidate:
    """Tests for the marker prefix check."""

    def test_star_prefixed_line(self):
        assert is_heading_candidate("* Assets")
        assert is_heading_candidate("***")

    def test_plain_lines(self):
        assert not is_heading_candidate("Assets")
        assert not is_heading_candidate("")
        assert not is_heading_candidate("  * indented")
        assert not is_heading_candidate("; * commented out")


class TestExtractHeading:
    """Tests for extract_heading."""

    @pytest.mark.parametrize(
        ("text", "level"),
        [("* A", 1), ("** A", 2), ("*** A", 3), ("****** A", 6)],
    )
    def test_level_is_marker_run_length(self, text, level):
        block = extract_heading(text)

        assert block is not None
        assert block.level == level
        assert block.label == "A"

    def test_label_is_trimmed(self):
        block = extract_heading("**    Expenses   ")

        assert block is not None
        assert block.label == "Expenses"

    def test_inner_spacing_preserved(self):
        block = extract_heading("* Living  costs")

        assert block is not None
        assert block.label == "Living  costs"

    def test_comment_is_stripped(self):
        block = extract_heading("* A  ;comment")

        assert block is not None
        assert block.label == "A"

    def test_comment_with_stars_does_not_change_level(self):
        block = extract_heading("** Accounts ;*** folded")

        assert block is not None
        assert block.level == 2
        assert block.label == "Accounts"

    def test_no_space_after_markers(self):
        block = extract_heading("**Bank")

        assert block is not None
        assert block.level == 2
        assert block.label == "Bank"

    def test_stars_inside_label_are_dropped(self):
        block = extract_heading("* Totals *net*")

        assert block is not None
        assert block.level == 1
        assert block.label == "Totals net"

    def test_stars_after_gap_do_not_add_to_level(self):
        block = extract_heading("** Bank ** Savings")

        assert block is not None
        assert block.level == 2
        assert block.label == "Bank  Savings"

    @pytest.mark.parametrize("text", ["* *", "** ***", "* * * ;note"])
    def test_stars_only_label_is_not_a_heading(self, text):
        assert extract_heading(text) is None

    @pytest.mark.parametrize("text", ["*", "***", "**   ", "* ;comment only", "*;"])
    def test_empty_label_is_not_a_heading(self, text):
        assert extract_heading(text) is None

    def test_kind_depends_on_level(self):
        top = extract_heading("* Top")
        nested = extract_heading("** Nested")
        deep = extract_heading("**** Deep")

        assert top is not None and nested is not None and deep is not None
        assert top.kind == SymbolKind.CLASS
        assert nested.kind == SymbolKind.FUNCTION
        assert deep.kind == SymbolKind.FUNCTION

    def test_span_is_unset(self):
        block = extract_heading("* Top")

        assert block is not None
        assert block.start is None
        assert block.end is None


class TestSymbolKind:
    """Tests for SymbolKind."""

    def test_for_level(self):
        assert SymbolKind.for_level(1) is SymbolKind.CLASS
        assert SymbolKind.for_level(2) is SymbolKind.FUNCTION

    def test_values_are_strings(self):
        assert SymbolKind.CLASS.value == "class"
        assert SymbolKind.FUNCTION.value == "function"
