"""
Validation Constants

Contains whitelist values and limits for validating user input and
recipe data received from the extraction service.
"""

# Recipe visibility (whitelist)
VISIBILITY_PUBLIC = 'public'
VISIBILITY_PRIVATE = 'private'
VALID_VISIBILITIES = {VISIBILITY_PUBLIC, VISIBILITY_PRIVATE}

# Maximum field lengths
MAX_LENGTHS = {
    'recipe_title': 200,
    'description': 5000,
    'ingredient_text': 500,
    'instruction_text': 5000,
    'tag': 50,
    'link': 500,
}

# Maximum list sizes
MAX_INGREDIENTS = 200
MAX_INSTRUCTIONS = 200
MAX_TAGS = 20

# Upper bound for prep/cook time in minutes (one week)
MAX_MINUTES = 7 * 24 * 60
