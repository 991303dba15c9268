"""
Rational Quantity Service

Exact arithmetic for ingredient quantities. Every value is a reduced
fractions.Fraction so scaling up and back down gives the original amount.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from constants import MAX_DENOMINATOR, MAX_EXPONENT


class QuantityError(ValueError):
    """Raised when text or a number cannot be turned into an exact quantity."""


_MIXED_RE = re.compile(r'^(\d+)\s+(\d+)/(\d+)$')
_FRACTION_RE = re.compile(r'^(\d+)/(\d+)$')
_DECIMAL_RE = re.compile(r'^\d*\.\d+$|^\d+$')


def parse_rational(text):
    """
    Convert a quantity expression into an exact Fraction.

    Handles: 2, 1.5, .5, 3/4, 1 1/2

    Raises:
        QuantityError: if the text is not a quantity, has a zero denominator
            or has more digits than Python will convert
    """
    if text is None:
        raise QuantityError('No quantity given')

    s = str(text).strip()

    try:
        mixed_match = _MIXED_RE.match(s)
        if mixed_match:
            whole = int(mixed_match.group(1))
            return whole + _fraction(mixed_match.group(2), mixed_match.group(3))

        frac_match = _FRACTION_RE.match(s)
        if frac_match:
            return _fraction(frac_match.group(1), frac_match.group(2))

        if _DECIMAL_RE.match(s):
            # Fraction parses decimal strings exactly ("1.5" -> 3/2)
            return Fraction(s)
    except QuantityError:
        raise
    except (ValueError, OverflowError) as e:
        # int() refuses strings past sys.get_int_max_str_digits()
        raise QuantityError(f'Quantity too large: {s[:20]}...') from e

    raise QuantityError(f'Not a quantity: {text!r}')


def _fraction(numerator, denominator):
    if int(denominator) == 0:
        raise QuantityError(f'Zero denominator in {numerator}/{denominator}')
    return Fraction(int(numerator), int(denominator))


def to_rational(value):
    """
    Convert a scale factor or servings value to a Fraction.

    Ints, Fractions and Decimals convert exactly. Floats go through their
    shortest decimal form, so 1.5 becomes 3/2 rather than its binary
    approximation. Values with no short decimal form (2/3 as a float) are
    approximated to a denominator of at most MAX_DENOMINATOR.

    Raises:
        QuantityError: for non-numeric or non-finite input, or a power of ten
            beyond MAX_EXPONENT ("1e5000")
    """
    if isinstance(value, bool) or value is None:
        raise QuantityError(f'Not a number: {value!r}')

    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)

    try:
        if isinstance(value, float):
            if not math.isfinite(value):
                raise QuantityError(f'Not a finite number: {value!r}')
            result = Fraction(repr(value))
        elif isinstance(value, Decimal):
            result = _from_decimal(value)
        elif isinstance(value, str):
            text = value.strip()
            result = Fraction(text) if '/' in text else _from_decimal(Decimal(text))
        else:
            raise QuantityError(f'Not a number: {value!r}')
    except QuantityError:
        raise
    except (ValueError, TypeError, ZeroDivisionError, OverflowError, InvalidOperation) as e:
        raise QuantityError(f'Not a number: {value!r}') from e

    if result.denominator > MAX_DENOMINATOR:
        result = result.limit_denominator(MAX_DENOMINATOR)
    return result


def _from_decimal(number):
    if not number.is_finite():
        raise QuantityError(f'Not a finite number: {number}')
    if number and abs(number.adjusted()) > MAX_EXPONENT:
        raise QuantityError(f'Number out of range: {number}')
    return Fraction(number)


def format_mixed(value):
    """
    Format a Fraction as a whole number or mixed number for display.

    Examples:
        >>> format_mixed(Fraction(4))
        '4'
        >>> format_mixed(Fraction(3, 2))
        '1 1/2'
        >>> format_mixed(Fraction(2, 3))
        '2/3'
    """
    if value.denominator == 1:
        return str(value.numerator)

    sign = '-' if value < 0 else ''
    whole, remainder = divmod(abs(value.numerator), value.denominator)
    fraction = f"{remainder}/{value.denominator}"
    if whole:
        return f"{sign}{whole} {fraction}"
    return f"{sign}{fraction}"
