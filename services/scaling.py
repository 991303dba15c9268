"""
Scaling Service

Rewrites ingredient lines for a different number of servings. Only the
leading quantity changes ('1/2 tsp salt' x 3 -> '1 1/2 tsp salt'); the rest
of the line is kept as written.
"""

import logging

from constants import PLACEHOLDER_TEXT
from .parsing import split_quantity
from .rational import QuantityError, format_mixed, parse_rational, to_rational
from .servings import parse_servings

_LOGGER = logging.getLogger(__name__)


class Unscaled(str):
    """Display text for an ingredient whose scaled amount can't be computed.

    Compares equal to its text so templates render it like any other line,
    but is_placeholder() tells it apart from a real ingredient.
    """
    __slots__ = ()

    def __repr__(self):
        return 'UNSCALED'


UNSCALED = Unscaled(PLACEHOLDER_TEXT)


def is_placeholder(value):
    """True if value is the 'cannot compute' marker rather than an ingredient."""
    return isinstance(value, Unscaled)


def placeholders(ingredients):
    """One placeholder per ingredient."""
    return [UNSCALED for _ in ingredients]


def scale_ingredient(text, factor):
    """Scale the leading quantity of one ingredient line by an exact factor.

    Lines with no quantity, or a quantity that can't be parsed, come back
    unchanged, as does anything that isn't a string. Raises QuantityError if
    factor itself is not a number.
    """
    factor = to_rational(factor)
    if not isinstance(text, str):
        return text

    parts = split_quantity(text)
    if parts is None:
        return text

    quantity_text, rest = parts
    try:
        quantity = parse_rational(quantity_text)
    except QuantityError as e:
        _LOGGER.warning("Could not parse ingredient quantity %r: %s", quantity_text[:40], e)
        return text

    try:
        scaled = format_mixed(quantity * factor)
    except ValueError as e:
        # str() refuses ints past sys.get_int_max_str_digits()
        _LOGGER.warning("Could not format scaled quantity for %r: %s", quantity_text[:40], e)
        return text

    return f"{scaled} {rest}".strip()


def scale_ingredients(ingredients, factor):
    """
    Scale every ingredient line by factor.

    Args:
        ingredients: List of ingredient strings
        factor: Scale factor (int, float, Decimal, Fraction or numeric string)

    Returns:
        New list, same length and order. A factor of 1 returns the lines
        as-is; a non-numeric or non-positive factor returns placeholders.
    """
    ingredients = list(ingredients)

    try:
        factor = to_rational(factor)
    except QuantityError as e:
        _LOGGER.debug("Cannot scale ingredients: %s", e)
        return placeholders(ingredients)

    if factor <= 0:
        _LOGGER.debug("Cannot scale ingredients: factor %s is not positive", factor)
        return placeholders(ingredients)

    if factor == 1:
        return ingredients

    _LOGGER.debug("Scaling %d ingredients by %s", len(ingredients), factor)
    return [scale_ingredient(ingredient, factor) for ingredient in ingredients]


def scale_for_servings(ingredients, base_servings, desired_servings):
    """
    Scale a recipe's ingredients from its own servings to the requested ones.

    Args:
        ingredients: The recipe's ingredient lines
        base_servings: Servings the recipe was written for
        desired_servings: What the user asked for, as typed (str) or a number

    Returns:
        Scaled ingredient list. Non-numeric or non-positive requests get one
        placeholder per ingredient; asking for the recipe's own servings
        returns the original lines untouched.
    """
    ingredients = list(ingredients)

    desired = parse_servings(desired_servings)
    if desired is None:
        _LOGGER.debug("Cannot scale recipe: servings %r is not a number", desired_servings)
        return placeholders(ingredients)

    base = parse_servings(base_servings)
    if base is not None and desired == base:
        return ingredients

    if desired <= 0:
        _LOGGER.debug("Cannot scale recipe: servings must be positive, got %s", desired)
        return placeholders(ingredients)

    if base is None or base <= 0:
        _LOGGER.warning("Cannot scale recipe: original servings %r not available or invalid",
                        base_servings)
        return placeholders(ingredients)

    return scale_ingredients(ingredients, desired / base)
