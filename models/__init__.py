"""
Models Package

Exports the recipe document dataclasses, the key-value slot model and the
db instance for use throughout the application.
"""

from .base import db

from .recipe import (
    Recipe, FlourComponent, LiquidComponent, Amendment, new_id, default_flour_components
)
from .settings import Settings

__all__ = [
    'db',
    'Recipe',
    'FlourComponent',
    'LiquidComponent',
    'Amendment',
    'new_id',
    'default_flour_components',
    'Settings',
]
