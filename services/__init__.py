"""
Services Package

The dough formulation engine: conversion, flour blend, hydration,
aggregation, and the recipe store and editor built on top of them.
"""

from .conversion import (
    weight_from_percentage,
    percentage_from_weight,
)

from .flour_blend import (
    BlendEntry,
    default_flour_set,
    normalize_flour_blend,
    add_flour_component,
    update_flour_share,
    rename_flour_component,
    remove_flour_component,
    enable_detailed_composition,
    disable_detailed_composition,
)

from .hydration import (
    HydrationResult,
    default_egg_count,
    effective_egg_count,
    water_from_eggs,
    liquid_blend_weight,
    resolve_hydration,
    enable_eggs,
    disable_eggs,
    set_egg_count,
    set_flour_weight,
    default_liquid_set,
    enable_custom_liquid_blend,
    disable_custom_liquid_blend,
    add_liquid_component,
    update_liquid_weight,
    rename_liquid_component,
    remove_liquid_component,
)

from .aggregator import (
    IngredientLine,
    DoughCalculation,
    format_quantity,
    format_yeast_quantity,
    calculate_dough,
    build_ingredient_list,
    export_recipe,
    add_amendment,
    update_amendment,
    remove_amendment,
)

from .errors import (
    DoughMasterError,
    RecipeValidationError,
    RecipeNotFoundError,
    RecipeStoreCorruptError,
)

from .repository import InMemoryRecipeRepository, SettingsRecipeRepository
from .recipe_store import RecipeStore, unique_name
from .editor import DoughEditor

__all__ = [
    # Conversion
    'weight_from_percentage',
    'percentage_from_weight',
    # Flour blend
    'BlendEntry',
    'default_flour_set',
    'normalize_flour_blend',
    'add_flour_component',
    'update_flour_share',
    'rename_flour_component',
    'remove_flour_component',
    'enable_detailed_composition',
    'disable_detailed_composition',
    # Hydration
    'HydrationResult',
    'default_egg_count',
    'effective_egg_count',
    'water_from_eggs',
    'liquid_blend_weight',
    'resolve_hydration',
    'enable_eggs',
    'disable_eggs',
    'set_egg_count',
    'set_flour_weight',
    'default_liquid_set',
    'enable_custom_liquid_blend',
    'disable_custom_liquid_blend',
    'add_liquid_component',
    'update_liquid_weight',
    'rename_liquid_component',
    'remove_liquid_component',
    # Aggregation
    'IngredientLine',
    'DoughCalculation',
    'format_quantity',
    'format_yeast_quantity',
    'calculate_dough',
    'build_ingredient_list',
    'export_recipe',
    'add_amendment',
    'update_amendment',
    'remove_amendment',
    # Errors
    'DoughMasterError',
    'RecipeValidationError',
    'RecipeNotFoundError',
    'RecipeStoreCorruptError',
    # Store
    'InMemoryRecipeRepository',
    'SettingsRecipeRepository',
    'RecipeStore',
    'unique_name',
    'DoughEditor',
]
