"""
Recipe Tag Constants

Common tags offered when adding a recipe. Users may also type their own.
"""

RECIPE_TAGS = [
    'Bread',
    'Casseroles',
    'Chicken',
    'Fish',
    'Meat',
    'Snacks',
    'Dips',
    'Pashtet',
    'Vegan',
    'Vegetarian',
    'Rice',
    'Lentils',
    'Pasta',
    'Salads',
    'Desserts',
    'Soups',
    'Others',
]
