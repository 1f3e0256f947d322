"""
Flour Blend Service

Turns the relative share values of a detailed flour composition into a
percentage and weight per flour that always add up to the total flour
weight, whatever the raw shares sum to.
"""

from dataclasses import dataclass, replace

from constants import TOTAL_FLOUR_ID, TOTAL_FLOUR_NAME
from models.recipe import FlourComponent, default_flour_components, new_id
from utils.numeric import clamp_field
from utils.sanitizer import sanitize_component_name


@dataclass(frozen=True)
class BlendEntry:
    id: str
    name: str
    percentage: float
    weight: float


def default_flour_set():
    """Fresh Default Flour Set: the first flour carries the whole blend."""
    return default_flour_components()


def _fallback_index(components):
    """Index of the component that takes the whole blend when every share is zero."""
    for index, component in enumerate(components):
        if component.is_predefined:
            return index
    return 0


def normalize_flour_blend(flour_weight, components, use_detailed=True):
    """
    Break the total flour weight down by component.

    Args:
        flour_weight: Total flour in grams
        components: Ordered FlourComponent list
        use_detailed: Whether the detailed composition is switched on

    Returns:
        List of BlendEntry in component order. A single synthetic
        "Flour (Total)" entry when the detailed blend is off or there is no
        flour; an empty list when there are no components.
    """
    if not use_detailed or flour_weight <= 0:
        return [BlendEntry(TOTAL_FLOUR_ID, TOTAL_FLOUR_NAME, 100.0, max(flour_weight, 0.0))]

    if not components:
        return []

    shares = [max(c.share_value, 0.0) for c in components]
    total_shares = sum(shares)
    if total_shares == 0:
        # Display-only fallback; the stored shares are left as they are
        shares = [0.0] * len(components)
        shares[_fallback_index(components)] = 1.0
        total_shares = 1.0

    entries = []
    for component, share in zip(components, shares):
        percentage = share / total_shares * 100
        entries.append(BlendEntry(
            id=component.id,
            name=component.name,
            percentage=percentage,
            weight=percentage / 100 * flour_weight,
        ))
    return entries


def add_flour_component(components, name='Custom Flour'):
    """Append a user-added flour with a zero share."""
    name = sanitize_component_name(name) or 'Custom Flour'
    return list(components) + [
        FlourComponent(id=new_id(), name=name, share_value=0.0,
                       is_custom=True, is_predefined=False)
    ]


def update_flour_share(components, component_id, share_value):
    return [
        replace(c, share_value=clamp_field('shareValue', share_value))
        if c.id == component_id else c
        for c in components
    ]


def rename_flour_component(components, component_id, name):
    """Rename a flour. Blank names are ignored and the old name kept."""
    name = sanitize_component_name(name)
    if not name:
        return list(components)
    return [replace(c, name=name) if c.id == component_id else c for c in components]


def remove_flour_component(components, component_id):
    """
    Remove a flour from the blend.

    Removing the last flour restores the Default Flour Set. If the flours
    left all have a zero share, the first predefined (else first) one is
    given a share of 100 so the blend stays defined.
    """
    remaining = [replace(c) for c in components if c.id != component_id]
    if not remaining:
        return default_flour_set()

    if sum(max(c.share_value, 0.0) for c in remaining) == 0:
        index = _fallback_index(remaining)
        remaining = [
            replace(c, share_value=100.0 if i == index else 0.0)
            for i, c in enumerate(remaining)
        ]
    return remaining


def enable_detailed_composition(recipe):
    """Switch the detailed blend on, installing the Default Flour Set if there is none."""
    composition = recipe.flour_composition or default_flour_set()
    return recipe.copy(use_detailed_flour_composition=True,
                       flour_composition=[replace(c) for c in composition])


def disable_detailed_composition(recipe):
    return recipe.copy(use_detailed_flour_composition=False)
