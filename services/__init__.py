"""
Services Package

Business logic modules for the recipe application.
"""

from .rational import (
    QuantityError,
    parse_rational,
    to_rational,
    format_mixed,
)

from .parsing import (
    split_quantity,
)

from .servings import (
    parse_servings,
    step_servings,
    format_servings,
)

from .scaling import (
    UNSCALED,
    Unscaled,
    is_placeholder,
    scale_ingredient,
    scale_ingredients,
    scale_for_servings,
)

from .extraction import (
    ExtractionError,
    parse_extraction_content,
    recipe_from_extraction,
)

__all__ = [
    # Rational
    'QuantityError',
    'parse_rational',
    'to_rational',
    'format_mixed',
    # Parsing
    'split_quantity',
    # Servings
    'parse_servings',
    'step_servings',
    'format_servings',
    # Scaling
    'UNSCALED',
    'Unscaled',
    'is_placeholder',
    'scale_ingredient',
    'scale_ingredients',
    'scale_for_servings',
    # Extraction
    'ExtractionError',
    'parse_extraction_content',
    'recipe_from_extraction',
]
