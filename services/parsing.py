"""
Parsing Service

Functions for finding the leading quantity of an ingredient line.
"""

import re

# Order matters! Mixed fractions first, then simple fractions, then decimals,
# then whole numbers. Each must end where the number ends (not mid "1.5.2").
QUANTITY_PATTERN = re.compile(
    r'^\s*'
    r'(\d+\s+\d+/\d+(?![\d/.])'
    r'|\d+/\d+(?![\d/.])'
    r'|\d*\.\d+(?![\d/.])'
    r'|\d+(?![\d/.]))'
    r'\s*'
)


def split_quantity(text):
    """
    Split an ingredient line like '1 1/2 cups sugar' into ('1 1/2', 'cups sugar').

    Returns None when the line doesn't start with a quantity
    (e.g. 'a pinch of salt', 'salt to taste').
    """
    if not text:
        return None

    qty_match = QUANTITY_PATTERN.match(text)
    if not qty_match:
        return None

    return qty_match.group(1), text[qty_match.end():]
