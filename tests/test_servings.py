from fractions import Fraction

from services.servings import format_servings, parse_servings, step_servings


def test_parse_servings():
    assert parse_servings("6") == 6
    assert parse_servings(" 1.5 ") == Fraction(3, 2)
    assert parse_servings(4.0) == 4
    assert parse_servings("-2") == -2
    assert parse_servings("0") == 0


def test_parse_servings_not_a_number():
    assert parse_servings("") is None
    assert parse_servings("   ") is None
    assert parse_servings("abc") is None
    assert parse_servings(None) is None


def test_step_servings():
    assert step_servings("4", 4, 0.5) == Fraction(9, 2)
    assert step_servings("4", 4, -0.5) == Fraction(7, 2)


def test_step_servings_starts_from_recipe_servings():
    assert step_servings("", 4, 0.5) == Fraction(9, 2)
    assert step_servings("abc", 4, -0.5) == Fraction(7, 2)
    assert step_servings("abc", None, 0.5) == 1


def test_step_servings_never_below_minimum():
    assert step_servings("0.5", 4, -0.5) == Fraction(1, 2)
    assert step_servings("-3", 4, 0.5) == Fraction(1, 2)


def test_format_servings():
    assert format_servings(Fraction(9, 2)) == "4.5"
    assert format_servings(4.0) == "4"
    assert format_servings(Fraction(1, 2)) == "0.5"
    assert format_servings(Fraction(2, 3)) == "0.67"
    assert format_servings("abc") == ""


def test_parse_servings_out_of_range():
    assert parse_servings("100") == 100
    assert parse_servings("150") is None
    assert parse_servings("-150") is None
    assert parse_servings("1e5000") is None
    assert parse_servings("1e-5000") is None


def test_step_servings_never_above_maximum():
    assert step_servings("100", 4, 0.5) == 100
    assert step_servings("99.75", 4, 0.5) == 100
    assert step_servings("1e5000", 4, 0.5) == Fraction(9, 2)


def test_format_servings_keeps_exact_decimals():
    assert format_servings(2.125) == "2.125"
    assert format_servings(Fraction(1, 8)) == "0.125"
    assert format_servings("0.05") == "0.05"
    assert format_servings(parse_servings(format_servings(2.125))) == "2.125"
