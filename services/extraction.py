"""
Extraction Service

Turns the JSON returned by the recipe extraction service into fields for a
new Recipe. The service is asked for: title, description, ingredients,
instructions, cookTime, prepTime, servings, plus the link of the page it
was read from. Any of them may be null.
"""

import json
import logging

from constants import (
    DEFAULT_SERVINGS, MAX_INGREDIENTS, MAX_INSTRUCTIONS, MAX_LENGTHS, MAX_MINUTES,
    VALID_VISIBILITIES, VISIBILITY_PUBLIC,
)
from utils.sanitizer import (
    sanitize_lines, sanitize_recipe_name, sanitize_tags, sanitize_text, sanitize_url,
)
from .servings import parse_servings

_LOGGER = logging.getLogger(__name__)


class ExtractionError(ValueError):
    """Raised when the extraction output can't be read as a recipe."""


def parse_extraction_content(content):
    """
    Pull the JSON object out of the language model's reply.

    The reply should be bare JSON but sometimes comes wrapped in prose or a
    code fence, so everything between the first '{' and the last '}' is used.
    """
    if not content or not isinstance(content, str):
        raise ExtractionError('Empty extraction response')

    start = content.find('{')
    end = content.rfind('}') + 1
    if start == -1 or end <= start:
        raise ExtractionError('No JSON object in extraction response')

    try:
        data = json.loads(content[start:end])
    except json.JSONDecodeError as e:
        raise ExtractionError(f'Invalid JSON in extraction response: {e}') from e

    if not isinstance(data, dict):
        raise ExtractionError('Extraction response is not a JSON object')
    return data


def _minutes(value):
    """Coerce a time in minutes to a non-negative int (0 when missing)."""
    if isinstance(value, bool):
        return 0
    try:
        minutes = int(float(value))
    except (ValueError, TypeError, OverflowError):
        return 0
    return max(0, min(minutes, MAX_MINUTES))


def _servings(value):
    # parse_servings already rejects anything above MAX_SERVINGS
    servings = parse_servings(value)
    if servings is None or servings <= 0:
        return DEFAULT_SERVINGS
    return float(servings)


def recipe_from_extraction(payload):
    """
    Normalize an extraction payload into Recipe constructor kwargs.

    Args:
        payload: dict from the extraction service

    Returns:
        dict with title, description, link, cook_time, prep_time, servings,
        tags, ingredients, instructions, visibility

    Raises:
        ExtractionError: if payload is not a JSON object
    """
    if not isinstance(payload, dict):
        raise ExtractionError('Recipe payload must be a JSON object')

    visibility = payload.get('visibility') or VISIBILITY_PUBLIC
    if not isinstance(visibility, str) or visibility not in VALID_VISIBILITIES:
        visibility = VISIBILITY_PUBLIC

    fields = {
        'title': sanitize_recipe_name(payload.get('title')),
        'description': sanitize_text(payload.get('description'),
                                     max_length=MAX_LENGTHS['description']),
        'link': sanitize_url(payload.get('link')),
        'cook_time': _minutes(payload.get('cookTime')),
        'prep_time': _minutes(payload.get('prepTime')),
        'servings': _servings(payload.get('servings')),
        'tags': sanitize_tags(payload.get('tags')),
        'ingredients': sanitize_lines(payload.get('ingredients'), MAX_INGREDIENTS),
        'instructions': sanitize_lines(payload.get('instructions'), MAX_INSTRUCTIONS,
                                       max_length=MAX_LENGTHS['instruction_text']),
        'visibility': visibility,
    }

    _LOGGER.info("Extracted recipe %r with %d ingredients and %d steps",
                 fields['title'], len(fields['ingredients']), len(fields['instructions']))
    return fields
