"""
test_txt_utils.py
-----------------
Unit tests for txt utility functions.

Tests word count and reading time of article bodies.
"""
import pytest

from quire.utils.txt import CJK_CHARS_PER_MINUTE, WORDS_PER_MINUTE, compute_metrics


class TestComputeMetrics:
    """Test compute_metrics() function for word count and reading time."""

    def test_simple_text(self):
        """Test word count of a short sentence."""
        wc, rt = compute_metrics("Hello world")
        assert wc == 2
        assert rt == pytest.approx(2 / WORDS_PER_MINUTE)

    def test_empty_text(self):
        """Test empty text gives zero metrics."""
        assert compute_metrics("") == (0, 0.0)

    def test_whitespace_only(self):
        """Test whitespace-only text gives zero metrics."""
        assert compute_metrics("  \n\n  ") == (0, 0.0)

    def test_multiline_text(self):
        """Test that words on separate lines are all counted."""
        wc, _ = compute_metrics("one two\nthree four\n\nfive")
        assert wc == 5

    def test_reading_time_scales(self):
        """Test 260 words take one minute."""
        wc, rt = compute_metrics("word " * 260)
        assert wc == 260
        assert rt == pytest.approx(1.0)

    def test_unspaced_chinese_counts_characters(self):
        """Test each Han character of an unspaced paragraph is a word."""
        wc, rt = compute_metrics("你好世界")
        assert wc == 4
        assert rt == pytest.approx(4 / CJK_CHARS_PER_MINUTE)

    def test_mixed_latin_and_chinese(self):
        """Test Latin words and Han characters are added up."""
        wc, rt = compute_metrics("Hello 世界")
        assert wc == 3
        assert rt == pytest.approx(1 / WORDS_PER_MINUTE + 2 / CJK_CHARS_PER_MINUTE)

    def test_japanese_with_punctuation(self):
        """Test kana count, CJK punctuation does not."""
        wc, _ = compute_metrics("これはペンです。")
        assert wc == 7

    def test_han_attached_to_latin(self):
        """Test Han characters glued to a Latin word split it off."""
        wc, _ = compute_metrics("Python装饰器")
        assert wc == 4

    def test_korean_counted_by_spaces(self):
        """Test Hangul, which is spaced, is counted per word."""
        wc, _ = compute_metrics("한국어 글")
        assert wc == 2
