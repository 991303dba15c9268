"""
Servings Service

Reads the servings box on the recipe page and drives its +/- buttons.
"""

from decimal import Decimal

from constants import MAX_SERVINGS, MIN_SERVINGS, SERVINGS_STEP
from .rational import QuantityError, to_rational


def parse_servings(value):
    """
    Parse a servings value typed by the user ('6', '1.5', ' 2 ') or stored
    on a recipe (4, 4.0) into a Fraction.

    Returns None for blank or non-numeric input, and for anything larger
    than MAX_SERVINGS either way ('1e5000'). Zero and negative values are
    returned as-is; deciding what to do with them is up to the caller.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None

    try:
        servings = to_rational(value)
    except QuantityError:
        return None

    if abs(servings) > MAX_SERVINGS:
        return None
    return servings


def step_servings(current, base, delta=SERVINGS_STEP, minimum=MIN_SERVINGS,
                  maximum=MAX_SERVINGS):
    """
    Move the servings value one step up (positive delta) or down.

    Starts from the recipe's own servings when the box doesn't hold a number,
    and stays between minimum and maximum.
    """
    start = parse_servings(current)
    if start is None:
        start = parse_servings(base)
    if start is None:
        start = to_rational(minimum)

    stepped = max(to_rational(minimum), start + to_rational(delta))
    return min(to_rational(maximum), stepped)


def _terminates(value):
    """True if value has an exact decimal form (denominator of only 2s and 5s)."""
    denominator = value.denominator
    for prime in (2, 5):
        while denominator % prime == 0:
            denominator //= prime
    return denominator == 1


def format_servings(value):
    """Format a servings value for the input box: 4, 4.5, 2.125, 0.67"""
    servings = parse_servings(value)
    if servings is None:
        return ''
    if servings.denominator == 1:
        return str(servings.numerator)
    if _terminates(servings):
        return format(Decimal(servings.numerator) / Decimal(servings.denominator), 'f')
    return f"{float(servings):.2f}".rstrip('0').rstrip('.')
