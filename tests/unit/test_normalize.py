"""Tests for reduce, pad and shift helpers."""

from exactcalc import ONE, ZERO, ExactDecimal, pad, parse, reduce, shift_left, shift_right
from exactcalc.normalize import shift, truncate_fraction, with_sign


class TestReduce:
    """Tests for reduce."""

    def test_strips_leading_integer_zeros(self):
        n = reduce(ExactDecimal(False, (0, 0, 7), (5,)))
        assert n.integer == (7,)
        assert n.fraction == (5,)

    def test_strips_trailing_fraction_zeros(self):
        n = reduce(ExactDecimal(False, (1,), (5, 0, 0)))
        assert n.fraction == (5,)

    def test_keeps_required_digits(self):
        n = reduce(ExactDecimal(False, (0, 0), (0, 2)))
        assert n.integer == (0,)
        assert n.fraction == (0, 2)
        n = reduce(ExactDecimal(False, (1, 0), (0, 0)))
        assert n.integer == (1, 0)
        assert n.fraction == (0,)

    def test_zero_is_canonical(self):
        n = reduce(ExactDecimal(False, (0, 0, 0), (0, 0)))
        assert n is ZERO

    def test_keeps_sign(self):
        n = reduce(ExactDecimal(True, (0, 3), (1, 0)))
        assert n.negative is True
        assert str(n) == "-3.1"

    def test_already_reduced_returned_as_is(self):
        n = parse("12.34")
        assert reduce(n) is n


class TestPad:
    """Tests for pad."""

    def test_pads_both_sides(self):
        a = parse("5.5")
        b = parse("123.456")
        padded = pad(a, b)
        assert padded.integer == (0, 0, 5)
        assert padded.fraction == (5, 0, 0)

    def test_pair_alignment(self):
        """Padding in pairs gives equal widths."""
        a = parse("12.5")
        b = parse("0.125")
        a = pad(a, b)
        b = pad(b, a)
        assert len(a.integer) == len(b.integer) == 2
        assert len(a.fraction) == len(b.fraction) == 3

    def test_value_unchanged(self):
        a = parse("-7.25")
        assert pad(a, parse("1000.00001")) == a

    def test_no_shrinking(self):
        a = parse("123.456")
        assert pad(a, parse("1.5")) is a


class TestShift:
    """Tests for shift_right and shift_left."""

    def test_shift_right(self):
        assert str(shift_right(parse("1.25"))) == "12.5"

    def test_shift_right_past_fraction(self):
        """An emptied fraction becomes a single zero."""
        assert str(shift_right(parse("1.5"))) == "15"
        assert str(shift_right(parse("15"))) == "150"

    def test_shift_right_drops_leading_zero(self):
        n = shift_right(parse("0.05"))
        assert n.integer == (0,)
        assert n.fraction == (5,)

    def test_shift_left(self):
        assert str(shift_left(parse("12.5"))) == "1.25"

    def test_shift_left_past_integer(self):
        """An emptied integer part becomes a single zero."""
        n = shift_left(parse("5"))
        assert n.integer == (0,)
        assert n.fraction == (5,)
        assert str(shift_left(n)) == "0.05"

    def test_shift_keeps_sign(self):
        assert str(shift_left(parse("-3"))) == "-0.3"
        assert str(shift_right(parse("-0.3"))) == "-3"

    def test_shift_zero(self):
        assert shift_left(ZERO) == ZERO
        assert shift_right(ZERO) == ZERO

    def test_shift_does_not_mutate(self):
        n = parse("4.2")
        shift_right(n)
        shift_left(n)
        assert str(n) == "4.2"

    def test_shift_places(self):
        assert str(shift(ONE, 3)) == "1000"
        assert str(shift(ONE, -3)) == "0.001"
        assert shift(ONE, 0) is ONE


class TestHelpers:
    """Tests for sign and truncation helpers."""

    def test_with_sign(self):
        assert str(with_sign(parse("2"), True)) == "-2"
        assert str(with_sign(parse("-2"), False)) == "2"

    def test_with_sign_zero_unsigned(self):
        assert with_sign(ZERO, True).negative is False

    def test_truncate_fraction(self):
        truncated, dropped = truncate_fraction(parse("0.123456"), 3)
        assert str(truncated) == "0.123"
        assert dropped == 4

    def test_truncate_fraction_to_zero_places(self):
        truncated, dropped = truncate_fraction(parse("2.71"), 0)
        assert str(truncated) == "2"
        assert dropped == 7

    def test_truncate_nothing_to_cut(self):
        truncated, dropped = truncate_fraction(parse("1.5"), 4)
        assert str(truncated) == "1.5"
        assert dropped == 0

    def test_truncate_negative(self):
        truncated, dropped = truncate_fraction(parse("-0.009"), 2)
        assert truncated == ZERO
        assert truncated.negative is False
        assert dropped == 9
