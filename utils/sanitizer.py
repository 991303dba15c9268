"""
Input Sanitization Module

Cleans user input and recipe data returned by the extraction service before
it is stored. HTML escaping is left to Jinja autoescape at render time so
ingredient text like 'salt & pepper' is stored as written.
"""

import re
from urllib.parse import urlparse

from constants import MAX_LENGTHS, MAX_TAGS

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text (descriptions).

    Keeps newlines but strips other control characters and null bytes.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length] + '...'

    return text


def sanitize_url(url, max_length=MAX_LENGTHS['link']):
    """
    Sanitize a recipe's source link by rejecting dangerous schemes.

    Only absolute http and https links are kept, so javascript:, data: and
    the like never end up in an href.

    Args:
        url: The link to validate (can be None)
        max_length: Links longer than this are dropped rather than cut

    Returns:
        The link if safe, empty string if unsafe or invalid
    """
    if not url or not isinstance(url, str):
        return ''

    url = _CONTROL_CHARS.sub('', url).strip()
    if len(url) > max_length or re.search(r'\s', url):
        return ''

    try:
        parsed = urlparse(url)
    except ValueError:
        return ''

    if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
        return ''

    # Encoded schemes smuggled into the path or query
    url_lower = url.lower()
    for dangerous in ('javascript:', 'vbscript:', 'data:', '%6a%61%76%61'):
        if dangerous in url_lower:
            return ''

    return url


def sanitize_recipe_name(name, max_length=MAX_LENGTHS['recipe_title']):
    """
    Sanitize a recipe title for safe storage and display.

    Args:
        name: The recipe title to sanitize
        max_length: Maximum allowed length

    Returns:
        Sanitized title, 'Imported Recipe' if nothing is left
    """
    if not name:
        return 'Imported Recipe'

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters and null bytes
    name = _CONTROL_CHARS.sub('', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length-3] + '...'

    if not name:
        return 'Imported Recipe'

    return name


def sanitize_ingredient_text(text, max_length=MAX_LENGTHS['ingredient_text']):
    """
    Sanitize a single ingredient or instruction line.

    Internal spacing is kept as written ('1 1/2  cups') since the scaler
    only rewrites the leading quantity.

    Args:
        text: Single ingredient line
        max_length: Maximum length

    Returns:
        Sanitized line ('' for blank input)
    """
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Newlines inside one line would split it on the next edit
    text = re.sub(r'[\r\n\t]+', ' ', text)
    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_lines(lines, max_items, max_length=MAX_LENGTHS['ingredient_text']):
    """
    Sanitize a list of lines (or one newline-separated string), dropping blanks.

    Args:
        lines: List of strings, or a single string with one item per line
        max_items: Maximum number of lines kept
        max_length: Maximum length of each line

    Returns:
        List of non-empty sanitized lines
    """
    if not lines:
        return []

    if isinstance(lines, str):
        lines = lines.splitlines()

    cleaned = []
    for line in lines:
        line = sanitize_ingredient_text(line, max_length=max_length)
        if line:
            cleaned.append(line)

    return cleaned[:max_items]


def sanitize_tags(tags, max_length=MAX_LENGTHS['tag']):
    """
    Sanitize recipe tags given as a list or a comma-separated string.

    Duplicates are dropped (case-insensitive), first spelling wins.
    """
    if not tags:
        return []

    if isinstance(tags, str):
        tags = tags.split(',')

    cleaned = []
    seen = set()
    for tag in tags:
        tag = re.sub(r'\s+', ' ', sanitize_text(tag, max_length=max_length))
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        cleaned.append(tag)

    return cleaned[:MAX_TAGS]
