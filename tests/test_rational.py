import math
import sys
from decimal import Decimal
from fractions import Fraction

import pytest

from services.rational import QuantityError, format_mixed, parse_rational, to_rational


def test_parse_rational_valid():
    assert parse_rational("2") == Fraction(2)
    assert parse_rational("1.5") == Fraction(3, 2)
    assert parse_rational(".5") == Fraction(1, 2)
    assert parse_rational("3/4") == Fraction(3, 4)
    assert parse_rational("1 1/2") == Fraction(3, 2)
    assert parse_rational(" 6/4 ") == Fraction(3, 2)


def test_parse_rational_is_exact():
    assert parse_rational("0.1") * 3 == Fraction(3, 10)


@pytest.mark.parametrize("text", ["1/0", "2 1/0", "abc", "", "1/2/3", None])
def test_parse_rational_invalid(text):
    with pytest.raises(QuantityError):
        parse_rational(text)


def test_to_rational_numbers():
    assert to_rational(2) == Fraction(2)
    assert to_rational(1.5) == Fraction(3, 2)
    assert to_rational(0.1) == Fraction(1, 10)
    assert to_rational(Decimal("1.25")) == Fraction(5, 4)
    assert to_rational(" 2.5 ") == Fraction(5, 2)
    assert to_rational(Fraction(2, 3)) == Fraction(2, 3)


def test_to_rational_approximates_repeating_float():
    assert to_rational(6 / 4) == Fraction(3, 2)
    assert to_rational(4 / 6) == Fraction(2, 3)


@pytest.mark.parametrize("value", [
    "abc", "", None, True, math.nan, math.inf, [2],
    "1e5000", "1e-5000", Decimal("1e5000"), "9" * 5000,
])
def test_to_rational_invalid(value):
    with pytest.raises(QuantityError):
        to_rational(value)


def test_format_mixed():
    assert format_mixed(Fraction(4)) == "4"
    assert format_mixed(Fraction(3, 2)) == "1 1/2"
    assert format_mixed(Fraction(2, 3)) == "2/3"
    assert format_mixed(Fraction(7, 4)) == "1 3/4"
    assert format_mixed(Fraction(6, 4)) == "1 1/2"
    assert format_mixed(Fraction(-3, 2)) == "-1 1/2"


@pytest.mark.skipif(getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
                    reason="no int digit limit")
def test_parse_rational_too_many_digits():
    with pytest.raises(QuantityError, match="too large"):
        parse_rational("9" * 5000)
    with pytest.raises(QuantityError):
        parse_rational("1 " + "1" * 5000 + "/2")


def test_to_rational_large_but_reasonable():
    assert to_rational("1e3") == 1000
    assert to_rational("2.5e-3") == Fraction(1, 400)
