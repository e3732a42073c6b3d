"""Test suite for log preview helpers."""
from healthcare_translator.utils import log_preview, safe_truncate


class TestTextUtils:
    """Test cases for truncation."""

    def test_short_text_unchanged(self):
        assert safe_truncate("fever", 10) == "fever"

    def test_cuts_at_nearest_break(self):
        """Test truncation backs up to a word boundary."""
        assert safe_truncate("hello world again", 12) == "hello world..."

    def test_log_preview_collapses_whitespace(self):
        assert log_preview("my\n\nhead   hurts") == "my head hurts"
