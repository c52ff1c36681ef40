"""Tests for the character-level scanning primitives."""

import pytest

from minicss.errors import InvalidIdentifier, UnexpectedSyntax
from minicss.scanner import expect_char, scan_identifier, skip_whitespace


# ---------------------------------------------------------------------------
# skip_whitespace
# ---------------------------------------------------------------------------


class TestSkipWhitespace:
    def test_no_whitespace_is_unchanged(self):
        assert skip_whitespace("abc", 0) == 0

    def test_skips_mixed_whitespace(self):
        assert skip_whitespace(" \t\r\n x", 0) == 5

    def test_stops_at_end_of_input(self):
        assert skip_whitespace("a   ", 1) == 4

    def test_at_end_of_input(self):
        assert skip_whitespace("", 0) == 0


# ---------------------------------------------------------------------------
# scan_identifier
# ---------------------------------------------------------------------------


class TestScanIdentifier:
    def test_scans_letters(self):
        assert scan_identifier("color: red", 0) == ("color", 5)

    def test_preserves_case(self):
        assert scan_identifier("DiV{", 0) == ("DiV", 3)

    def test_scans_from_offset(self):
        assert scan_identifier("p { color", 4) == ("color", 9)

    def test_stops_at_digit(self):
        assert scan_identifier("red1", 0) == ("red", 3)

    def test_stops_at_dash(self):
        assert scan_identifier("font-size", 0) == ("font", 4)

    def test_fails_on_non_letter(self):
        with pytest.raises(InvalidIdentifier) as exc_info:
            scan_identifier("p { 1 }", 4)
        assert exc_info.value.offset == 4

    def test_fails_at_end_of_input(self):
        with pytest.raises(InvalidIdentifier):
            scan_identifier("abc", 3)

    def test_rejects_non_ascii_letters(self):
        with pytest.raises(InvalidIdentifier):
            scan_identifier("é", 0)


# ---------------------------------------------------------------------------
# expect_char
# ---------------------------------------------------------------------------


class TestExpectChar:
    def test_matches(self):
        assert expect_char("a:b", 1, ":") == 2

    def test_mismatch(self):
        with pytest.raises(UnexpectedSyntax) as exc_info:
            expect_char("a;b", 1, ":")
        assert exc_info.value.expected == ":"
        assert exc_info.value.offset == 1

    def test_does_not_skip_whitespace(self):
        with pytest.raises(UnexpectedSyntax):
            expect_char("a :", 1, ":")

    def test_end_of_input(self):
        with pytest.raises(UnexpectedSyntax) as exc_info:
            expect_char("p {", 3, "}")
        assert exc_info.value.expected == "}"
        assert str(exc_info.value) == "Expected syntax: '}'."
