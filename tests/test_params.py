"""
Unit tests for the integer parse step.
"""

import pytest

from app.utils.params import parse_int


class TestParseInt:
    """Tests for parse_int."""

    @pytest.mark.parametrize("raw, expected", [
        ("1", 1),
        ("42", 42),
        ("0", 0),
        ("-5", -5),
        ("+7", 7),
        ("  3", 3),
    ])
    def test_plain_integers(self, raw, expected):
        assert parse_int(raw) == expected

    def test_trailing_characters_ignored(self):
        """Only the leading digits count, like parseInt."""
        assert parse_int("2abc") == 2
        assert parse_int("2.9") == 2
        assert parse_int("10 20") == 10

    @pytest.mark.parametrize("raw", ["abc", "", "   ", "-", "+", "a1", ".5"])
    def test_not_a_number(self, raw):
        assert parse_int(raw) is None

    def test_none(self):
        assert parse_int(None) is None

    def test_non_ascii_digits_rejected(self):
        assert parse_int("٣") is None

    @pytest.mark.parametrize("raw, expected", [
        ("0x2", 2),
        ("0X1e", 30),
        ("0x1E", 30),
        ("-0x10", -16),
        ("  0xffzz", 255),
    ])
    def test_hex_prefix(self, raw, expected):
        """Without a radix parseInt reads 0x/0X as base 16."""
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["0x", "0X", "0xg", "-0x"])
    def test_hex_prefix_without_digits(self, raw):
        assert parse_int(raw) is None

    def test_leading_zero_is_decimal(self):
        assert parse_int("010") == 10
