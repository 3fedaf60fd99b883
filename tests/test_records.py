"""Tests for record parsing."""

import pytest

from aoc2024.records import (
    parse_int,
    parse_left,
    parse_levels,
    parse_record,
    parse_right,
    split_tokens,
)


class TestParseInt:
    """Strict integer token parsing."""

    @pytest.mark.parametrize("token,expected", [
        ("42", 42),
        ("-7", -7),
        ("+5", 5),
        ("007", 7),
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
    ])
    def test_valid_tokens(self, token, expected):
        assert parse_int(token) == expected

    @pytest.mark.parametrize("token", ["", "abc", "1_000", "1.5", "4x", "-", "\u0663", "\udcff"])
    def test_invalid_tokens(self, token):
        """Python-only spellings and non-ASCII digits are not integers."""
        assert parse_int(token) is None


class TestSplitting:
    """Whitespace splitting and the two-token rule."""

    def test_consecutive_whitespace_is_one_separator(self):
        assert split_tokens("  3 \t\t 4  \n") == ["3", "4"]

    def test_record_requires_two_tokens(self):
        assert parse_record("3") is None
        assert parse_record("3 4 5") is None
        assert parse_record("") is None

    def test_record_requires_both_integers(self):
        assert parse_record("3 x") is None
        assert parse_record("x 3") is None
        assert parse_record("3   4") == (3, 4)

    def test_columns_parse_independently(self):
        """A bad left token does not hide a good right token, and vice versa."""
        assert parse_right("x 5") == 5
        assert parse_left("x 5") is None
        assert parse_left("5 x") == 5
        assert parse_right("5 x") is None

    def test_levels_drop_non_integers(self):
        assert parse_levels("1 2 x 4") == [1, 2, 4]
        assert parse_levels("") == []

    def test_carriage_return_and_form_feed_separate_tokens(self):
        assert split_tokens("3\r4\r") == ["3", "4"]
        assert split_tokens("3\x0c3 3") == ["3", "3", "3"]

    def test_information_separators_are_not_whitespace(self):
        assert split_tokens("3\x1c4") == ["3\x1c4"]
        assert parse_record("3\x1c4") is None


class TestInt64Range:
    """Tokens outside the signed 64-bit range are not integers."""

    @pytest.mark.parametrize("token", [
        "9223372036854775808",
        "-9223372036854775809",
        "12345678901234567890",
    ])
    def test_out_of_range(self, token):
        assert parse_int(token) is None

    def test_out_of_range_line_is_skipped(self):
        assert parse_record("9223372036854775808 1") is None
