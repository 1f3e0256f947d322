"""
Constants Package

Domain constants and validation bounds for the dough calculator.
"""

from .dough import (
    EGG_UNIT_WEIGHT_G,
    EGG_WATER_FRACTION,
    FLOUR_PER_EGG_G,
    RECIPE_STORE_KEY,
    RESERVED_RECIPE_NAME,
    TOTAL_FLOUR_ID,
    TOTAL_FLOUR_NAME,
    DEFAULT_RECIPE,
    DEFAULT_FLOUR_SET,
    DEFAULT_LIQUID_SET,
    INGREDIENT_LABELS,
)

from .validation import FIELD_LIMITS, MAX_LENGTHS

__all__ = [
    'EGG_UNIT_WEIGHT_G',
    'EGG_WATER_FRACTION',
    'FLOUR_PER_EGG_G',
    'RECIPE_STORE_KEY',
    'RESERVED_RECIPE_NAME',
    'TOTAL_FLOUR_ID',
    'TOTAL_FLOUR_NAME',
    'DEFAULT_RECIPE',
    'DEFAULT_FLOUR_SET',
    'DEFAULT_LIQUID_SET',
    'INGREDIENT_LABELS',
    'FIELD_LIMITS',
    'MAX_LENGTHS',
]
