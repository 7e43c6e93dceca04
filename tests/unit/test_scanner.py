"""
Unit tests for the reversing scanner.
"""
import pytest

from mailstrip.exceptions import LineTooLongError, MailstripError
from mailstrip.parsing.scanner import iter_reversed_lines, reverse_text


class TestReverseText:

    def test_ascii(self):
        assert reverse_text("abc\ndef") == "fed\ncba"

    def test_multibyte_code_points(self):
        assert reverse_text("héllo") == "olléh"


class TestIterReversedLines:
    """Tests for iter_reversed_lines."""

    def test_bottom_up_order(self):
        lines = list(iter_reversed_lines("first\nsecond\nthird", 1024))
        assert lines == ["driht", "dnoces", "tsrif"]

    def test_trailing_newline_gives_leading_empty_line(self):
        lines = list(iter_reversed_lines("Hello\n", 1024))
        assert lines == ["", "olleH"]

    def test_empty_text_yields_one_empty_line(self):
        assert list(iter_reversed_lines("", 1024)) == [""]

    def test_limit_is_inclusive(self):
        lines = list(iter_reversed_lines("x" * 10, 10))
        assert lines == ["x" * 10]

    def test_line_too_long(self):
        with pytest.raises(LineTooLongError) as exc_info:
            list(iter_reversed_lines("abc\n" + "x" * 20 + "\nend", 10))

        err = exc_info.value
        assert err.line_number == 2
        assert err.size == 20
        assert err.limit == 10
        assert "Line 2" in err.message

    def test_limit_counts_utf8_bytes(self):
        # 6 characters, 12 bytes
        with pytest.raises(LineTooLongError) as exc_info:
            list(iter_reversed_lines("é" * 6, 10))
        assert exc_info.value.size == 12

    def test_lines_before_the_long_one_are_yielded(self):
        scanned = []
        with pytest.raises(LineTooLongError):
            for line in iter_reversed_lines("y" * 50 + "\nok\nfine", 10):
                scanned.append(line)
        assert scanned == ["enif", "ko"]

    def test_error_hierarchy(self):
        err = LineTooLongError(line_number=1, size=2, limit=1)
        assert isinstance(err, MailstripError)
        assert isinstance(err, ValueError)
