"""
Input Sanitization Module

Cleans free-text names typed into the editor before they become recipe
keys or ingredient labels. Output is escaped by Jinja at render time, so
names are stored as typed rather than HTML-escaped.
"""

import re

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_name(name, max_length=None):
    """
    Sanitize a recipe, component or amendment name.

    Args:
        name: The name to sanitize (can be None)
        max_length: Maximum allowed length (default: recipe name limit)

    Returns:
        Cleaned name; empty string when nothing printable is left
    """
    if max_length is None:
        max_length = MAX_LENGTHS['recipe_name']

    if name is None:
        return ''

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters and null bytes
    name = _CONTROL_CHARS.sub('', name)

    # Collapse runs of whitespace and trim
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length].rstrip()

    return name


def sanitize_recipe_name(name):
    """Sanitize a recipe name. Blank input stays blank so saving can reject it."""
    return sanitize_name(name, MAX_LENGTHS['recipe_name'])


def sanitize_component_name(name):
    """Sanitize a flour or liquid component name."""
    return sanitize_name(name, MAX_LENGTHS['component_name'])


def sanitize_amendment_name(name):
    """Sanitize a free-form amendment name."""
    return sanitize_name(name, MAX_LENGTHS['amendment_name'])
