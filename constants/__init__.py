"""
Constants Package

Shared values for quantity scaling, recipe tags and input validation.
"""

from .quantities import (
    PLACEHOLDER_TEXT,
    MAX_EXPONENT,
    MAX_DENOMINATOR,
    SERVINGS_STEP,
    MIN_SERVINGS,
    MAX_SERVINGS,
    DEFAULT_SERVINGS,
)

from .tags import RECIPE_TAGS

from .validation import (
    VISIBILITY_PUBLIC,
    VISIBILITY_PRIVATE,
    VALID_VISIBILITIES,
    MAX_LENGTHS,
    MAX_INGREDIENTS,
    MAX_INSTRUCTIONS,
    MAX_TAGS,
    MAX_MINUTES,
)
