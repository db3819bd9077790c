"""Tests for parsing decimal strings."""

import pytest

from exactcalc import ExactDecimal, ParseError, parse


class TestParseValid:
    """Tests for well-formed input."""

    def test_integer(self):
        """Integers get a single zero fraction digit."""
        n = parse("5")
        assert n == ExactDecimal(False, (5,), (0,))
        assert n.fraction == (0,)

    def test_decimal(self):
        n = parse("3.14")
        assert n.negative is False
        assert n.integer == (3,)
        assert n.fraction == (1, 4)

    def test_negative(self):
        n = parse("-12.5")
        assert n.negative is True
        assert n.integer == (1, 2)
        assert n.fraction == (5,)

    def test_leading_point(self):
        """A leading point gets a zero integer digit."""
        n = parse(".5")
        assert n.integer == (0,)
        assert n.fraction == (5,)

    def test_negative_leading_point(self):
        n = parse("-.25")
        assert n.negative is True
        assert n.integer == (0,)
        assert n.fraction == (2, 5)

    def test_trailing_point(self):
        """A trailing point gets a zero fraction digit."""
        n = parse("7.")
        assert n.integer == (7,)
        assert n.fraction == (0,)

    def test_strips_whitespace(self):
        assert parse("  42.5\n") == parse("42.5")

    def test_reduces(self):
        """Superfluous zeros are removed."""
        n = parse("007.50")
        assert n.integer == (7,)
        assert n.fraction == (5,)

    def test_keeps_single_zeros(self):
        n = parse("1.0")
        assert n.integer == (1,)
        assert n.fraction == (0,)
        n = parse("0.5")
        assert n.integer == (0,)

    def test_negative_zero_is_unsigned(self):
        n = parse("-0.0")
        assert n.negative is False
        assert n.is_zero

    def test_large_value(self):
        text = "123456789012345678901234567890.000000000000000000000000000001"
        n = parse(text)
        assert len(n.integer) == 30
        assert len(n.fraction) == 30
        assert str(n) == text


class TestParseInvalid:
    """Tests for malformed input."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty(self, text):
        with pytest.raises(ParseError, match="Empty input"):
            parse(text)

    @pytest.mark.parametrize("text", ["1-2", "12-", "--1", "1.-5"])
    def test_misplaced_sign(self, text):
        with pytest.raises(ParseError, match="Sign must be the first character"):
            parse(text)

    @pytest.mark.parametrize("text", ["1.2.3", "..5", "1..", "-.1.2"])
    def test_multiple_points(self, text):
        with pytest.raises(ParseError, match="Multiple decimal points"):
            parse(text)

    @pytest.mark.parametrize("text", ["1e5", "+5", "1,000", "abc", "1 000", "0x10"])
    def test_illegal_character(self, text):
        with pytest.raises(ParseError, match="Illegal character"):
            parse(text)

    def test_non_ascii_digit(self):
        """Only ASCII digits are accepted."""
        with pytest.raises(ParseError, match="Illegal character"):
            parse("١٢")

    @pytest.mark.parametrize("text", ["-", ".", "-."])
    def test_no_digits(self, text):
        with pytest.raises(ParseError, match="No digits"):
            parse(text)

    def test_non_str(self):
        with pytest.raises(ParseError, match="Expected str"):
            parse(5)  # type: ignore

    def test_parse_error_is_value_error(self):
        """ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse("1.2.3")


class TestFromStr:
    """Tests for the ExactDecimal.from_str entry point."""

    def test_from_str(self):
        assert ExactDecimal.from_str("-2.50") == parse("-2.5")

    def test_from_str_invalid(self):
        with pytest.raises(ParseError):
            ExactDecimal.from_str("two")
