"""
Quantity Constants

Contains the limits and display values used when scaling ingredient
quantities for a different number of servings.
"""

# Shown in place of every ingredient when the requested servings can't be used
PLACEHOLDER_TEXT = '—'

# Largest denominator kept when a scale factor has no exact decimal form
# (e.g. 4 -> 6 servings given as 0.6666666666666666)
MAX_DENOMINATOR = 10000

# Servings stepper used by the recipe view (+/- buttons)
SERVINGS_STEP = 0.5
MIN_SERVINGS = 0.5
MAX_SERVINGS = 100
DEFAULT_SERVINGS = 4

# Numbers written with a larger power of ten ("1e5000") are rejected before
# they are expanded into huge integers
MAX_EXPONENT = 100
