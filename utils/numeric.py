"""
Numeric Input Module

Parses numbers typed by the user. Nothing here raises: unparsable input
falls back to a default and out-of-range input is clamped.
"""

import math

from constants import FIELD_LIMITS


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
    except (ValueError, TypeError):
        result = default
    if math.isnan(result):
        result = default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    # Infinity on an unbounded side
    if math.isinf(result):
        result = default
    return result


def safe_int(value, default=0, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds. Decimals are truncated."""
    try:
        result = int(float(value)) if value not in (None, '') else default
    except (ValueError, TypeError, OverflowError):
        result = default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def clamp_field(field, value, default=0.0):
    """Parse ``value`` as a float and clamp it to the bounds of ``field``."""
    min_val, max_val = FIELD_LIMITS[field]
    return safe_float(value, default=default, min_val=min_val, max_val=max_val)


def clamp_count(field, value, default=0):
    """Integer counterpart of :func:`clamp_field`."""
    min_val, max_val = FIELD_LIMITS[field]
    return safe_int(value, default=default, min_val=min_val, max_val=max_val)
