"""
Hydration Service

Works out how much water has to be added directly to reach the target
overall hydration, after the water already supplied by eggs and by a
custom liquid blend. Also holds the egg and liquid-blend state changes.
"""

import math
from dataclasses import dataclass, replace

from constants import (
    DEFAULT_LIQUID_SET, EGG_UNIT_WEIGHT_G, EGG_WATER_FRACTION, FLOUR_PER_EGG_G
)
from models.recipe import LiquidComponent, new_id
from utils.numeric import clamp_count, clamp_field
from utils.sanitizer import sanitize_component_name
from .conversion import weight_from_percentage


@dataclass(frozen=True)
class HydrationResult:
    total_liquid_target: float
    egg_count: int
    water_from_eggs: float
    liquid_blend_weight: float
    net_added_water: float


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def default_egg_count(flour_weight):
    """One egg per 300 g of flour, rounded, never fewer than one."""
    if flour_weight <= 0:
        return 1
    return max(1, _round_half_up(flour_weight / FLOUR_PER_EGG_G))


def effective_egg_count(use_egg, egg_count):
    """Egg count used for calculation: 0 when eggs are off, at least 1 when on."""
    if not use_egg:
        return 0
    return max(1, int(egg_count or 0))


def total_egg_weight(egg_count):
    return egg_count * EGG_UNIT_WEIGHT_G


def water_from_eggs(egg_count):
    return egg_count * EGG_UNIT_WEIGHT_G * EGG_WATER_FRACTION


def liquid_blend_weight(use_custom_liquid_blend, components):
    if not use_custom_liquid_blend:
        return 0.0
    return float(sum(max(c.weight, 0.0) for c in components))


def net_added_water(total_liquid_target, egg_water, blend_weight):
    """Water to add directly. Never negative; surplus from eggs or liquids is not corrected."""
    return max(0.0, total_liquid_target - egg_water - blend_weight)


def resolve_hydration(recipe):
    """
    Resolve the water budget of a recipe.

    Args:
        recipe: Recipe being calculated

    Returns:
        HydrationResult
    """
    target = weight_from_percentage(recipe.flour_weight, recipe.desired_hydration_percentage)
    eggs = effective_egg_count(recipe.use_egg, recipe.egg_count)
    egg_water = water_from_eggs(eggs)
    blend = liquid_blend_weight(recipe.use_custom_liquid_blend, recipe.liquid_composition)
    return HydrationResult(
        total_liquid_target=target,
        egg_count=eggs,
        water_from_eggs=egg_water,
        liquid_blend_weight=blend,
        net_added_water=net_added_water(target, egg_water, blend),
    )


# ============================================
# STATE CHANGES - EGGS
# ============================================

def enable_eggs(recipe):
    """Switch eggs on. A stored count of 0 snaps to the default for the flour weight."""
    egg_count = recipe.egg_count
    if egg_count <= 0:
        egg_count = default_egg_count(recipe.flour_weight)
    return recipe.copy(use_egg=True, egg_count=egg_count)


def disable_eggs(recipe):
    return recipe.copy(use_egg=False)


def set_egg_count(recipe, egg_count):
    """Store the typed count as is (it may be 0 mid-edit); calculation clamps it."""
    return recipe.copy(egg_count=clamp_count('eggCount', egg_count))


def set_flour_weight(recipe, flour_weight):
    """
    Change the flour weight.

    While eggs are on, a count of 0, or a count of 1 when the new flour
    weight calls for more eggs, follows the default for the new weight.
    Any other count was chosen by the user and is kept.
    """
    flour_weight = clamp_field('flourWeight', flour_weight)
    updated = recipe.copy(flour_weight=flour_weight)
    if updated.use_egg:
        suggested = default_egg_count(flour_weight)
        if updated.egg_count <= 0 or (updated.egg_count == 1 and suggested > 1):
            updated.egg_count = suggested
    return updated


# ============================================
# STATE CHANGES - LIQUID BLEND
# ============================================

def default_liquid_set():
    return [
        LiquidComponent(id=new_id(), name=name, weight=float(weight),
                        is_custom=False, is_predefined=True)
        for name, weight in DEFAULT_LIQUID_SET
    ]


def enable_custom_liquid_blend(recipe):
    """Switch the liquid blend on, offering the default liquids if there are none."""
    composition = recipe.liquid_composition or default_liquid_set()
    return recipe.copy(use_custom_liquid_blend=True,
                       liquid_composition=[replace(c) for c in composition])


def disable_custom_liquid_blend(recipe):
    return recipe.copy(use_custom_liquid_blend=False)


def add_liquid_component(components, name='Custom Liquid'):
    name = sanitize_component_name(name) or 'Custom Liquid'
    return list(components) + [
        LiquidComponent(id=new_id(), name=name, weight=0.0,
                        is_custom=True, is_predefined=False)
    ]


def update_liquid_weight(components, component_id, weight):
    return [
        replace(c, weight=clamp_field('liquidWeight', weight)) if c.id == component_id else c
        for c in components
    ]


def rename_liquid_component(components, component_id, name):
    """Rename a liquid. Blank names are ignored and the old name kept."""
    name = sanitize_component_name(name)
    if not name:
        return list(components)
    return [replace(c, name=name) if c.id == component_id else c for c in components]


def remove_liquid_component(components, component_id):
    return [c for c in components if c.id != component_id]
