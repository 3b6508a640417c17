"""Unit tests for blank-line normalization."""

import pytest

from shuffle.normalization import normalize_text


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_four_breaks_collapse_to_two(self):
        """A run of four line breaks becomes a single blank line."""
        assert normalize_text("\n\n\n\n") == "\n\n"
        assert normalize_text("a\n\n\n\nb") == "a\n\nb"

    def test_three_breaks_collapse_to_two(self):
        """The shortest excess run is collapsed too."""
        assert normalize_text("a\n\n\nb") == "a\n\nb"

    def test_one_and_two_breaks_untouched(self):
        """Single line breaks and single blank lines are preserved."""
        assert normalize_text("a\nb") == "a\nb"
        assert normalize_text("a\n\nb") == "a\n\nb"

    def test_other_whitespace_untouched(self):
        """Spaces, tabs, and whitespace-only lines are not altered."""
        text = "  a\t\n \n \nb  "
        assert normalize_text(text) == text

    def test_multiple_runs_each_collapsed(self):
        """Every maximal run is collapsed independently."""
        assert normalize_text("a\n\n\nb\n\n\n\n\nc\nd") == "a\n\nb\n\nc\nd"

    def test_leading_and_trailing_runs(self):
        """Runs at the edges of the text collapse as well."""
        assert normalize_text("\n\n\nhello\n\n\n") == "\n\nhello\n\n"

    def test_empty_and_none(self):
        """Normalization is total."""
        assert normalize_text("") == ""
        assert normalize_text(None) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "a\n\n\n\n\nb",
            "\n\n\n",
            "x\n \n\n\ny",
            "line\r\n\r\n\r\nline",
        ],
    )
    def test_idempotent(self, text):
        """Applying normalization twice equals applying it once."""
        once = normalize_text(text)
        assert normalize_text(once) == once

    def test_carriage_returns_are_not_line_breaks(self):
        """Only \\n counts towards a run."""
        text = "a\r\n\r\n\r\nb"
        assert normalize_text(text) == text
