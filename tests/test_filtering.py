"""Unit tests for the content filter."""

import pytest

from billtext.filtering import ContentFilter, filter_content


class TestContentFilter:
    """Tests for boilerplate and front-matter removal."""

    def test_drops_front_matter_until_first_numbered_line(self):
        text = "AN ACT CONCERNING X.\nGeneral Assembly\n1 First line.\n2 Second line."
        assert filter_content(text) == "1 First line.\n2 Second line."

    @pytest.mark.parametrize(
        "boilerplate",
        [
            "3 of 10",
            "LCO No. 4567",
            "4567    LCO No.",
            "REP. JONES, 86th Dist.",
            "SEN. SMITH",
            "86th Dist.",
            "March 4, 2025",
            "17",
            "File No. 123",
            "Calendar No. 45",
            "Substitute Senate Bill No. 101",
        ],
    )
    def test_drops_boilerplate_inside_content(self, boilerplate):
        text = f"1 First line.\n{boilerplate}\n2 Second line."
        assert filter_content(text) == "1 First line.\n2 Second line."

    def test_page_number_always_removed(self):
        assert filter_content("3 of 10") == ""
        assert filter_content("1 text\n3 of 10") == "1 text"

    def test_boilerplate_does_not_start_content(self):
        """A page footer before the first real line is not a content trigger."""
        text = "1 of 3\nTitle page text\n1 Real content."
        assert filter_content(text) == "1 Real content."

    def test_keeps_blank_lines_as_paragraph_breaks(self):
        text = "1 First.\n\n2 Second."
        assert filter_content(text) == "1 First.\n\n2 Second."

    def test_collapses_internal_whitespace_and_keeps_indent(self):
        text = "1       First   line.\n        T1\n  indented    continuation"
        assert filter_content(text) == "1 First line.\n        T1\n  indented continuation"

    def test_applies_punctuation_spacing(self):
        assert filter_content("1 The board ,in its discretion .") == "1 The board, in its discretion."

    def test_joins_spaced_ranges_and_numbered_parens(self):
        text = "1 Sections 10 - 12 apply to 2)schools"
        assert filter_content(text) == "1 Sections 10-12 apply to 2) schools"

    def test_trigger_after_indentation(self):
        assert filter_content("   12 Indented start") == "   12 Indented start"

    def test_no_content_line(self):
        assert filter_content("Cover\nTitle\nAN ACT X.") == ""

    def test_empty_input(self):
        assert filter_content("") == ""

    def test_records_stats(self):
        content_filter = ContentFilter()
        content_filter.apply("Cover\n1 Line.\n3 of 10\n2 Line.")

        stats = content_filter.last_stats
        assert stats.input_lines == 4
        assert stats.front_matter_dropped == 1
        assert stats.boilerplate_dropped == 1
        assert stats.kept == 2
