# Utility modules for Recipe Box
from .sanitizer import (
    sanitize_text, sanitize_recipe_name, sanitize_ingredient_text,
    sanitize_lines, sanitize_tags, sanitize_url
)
