"""
Recipe Models

The recipe document and the components it owns. A recipe is persisted as
a single JSON record (camelCase keys) inside the recipe slot; these
dataclasses are its in-memory form.
"""

import uuid
from dataclasses import dataclass, field, replace

from constants import DEFAULT_FLOUR_SET, DEFAULT_RECIPE, FIELD_LIMITS
from utils.numeric import clamp_count, clamp_field, safe_int
from utils.sanitizer import (
    sanitize_amendment_name, sanitize_component_name, sanitize_recipe_name
)


def new_id():
    """Identifier for a new component or amendment."""
    return uuid.uuid4().hex


def _as_bool(value, default=False):
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'on', 'yes')
    return bool(value)


@dataclass
class FlourComponent:
    """One flour in a detailed blend. ``share_value`` is a relative weight, not a percentage."""
    id: str
    name: str
    share_value: float = 0.0
    is_custom: bool = False
    is_predefined: bool = False

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data.get('id') or new_id()),
            name=sanitize_component_name(data.get('name')),
            share_value=clamp_field('shareValue', data.get('shareValue')),
            is_custom=_as_bool(data.get('isCustom')),
            is_predefined=_as_bool(data.get('isPredefined')),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'shareValue': self.share_value,
            'isCustom': self.is_custom,
            'isPredefined': self.is_predefined,
        }


@dataclass
class LiquidComponent:
    """A liquid whose full weight counts toward hydration (milk, beer...)."""
    id: str
    name: str
    weight: float = 0.0
    is_custom: bool = False
    is_predefined: bool = False

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data.get('id') or new_id()),
            name=sanitize_component_name(data.get('name')),
            weight=clamp_field('liquidWeight', data.get('weight')),
            is_custom=_as_bool(data.get('isCustom')),
            is_predefined=_as_bool(data.get('isPredefined')),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'weight': self.weight,
            'isCustom': self.is_custom,
            'isPredefined': self.is_predefined,
        }


@dataclass
class Amendment:
    """Free-form solid ingredient. Adds to dough weight, never to hydration."""
    id: str
    name: str = ''
    weight: float = 0.0

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data.get('id') or new_id()),
            name=sanitize_amendment_name(data.get('name')),
            weight=clamp_field('amendmentWeight', data.get('weight')),
        )

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'weight': self.weight}


def default_flour_components():
    """Fresh Default Flour Set: the first flour carries the whole blend."""
    return [
        FlourComponent(id=new_id(), name=name, share_value=float(share),
                       is_custom=False, is_predefined=True)
        for name, share in DEFAULT_FLOUR_SET
    ]


def _components(raw, component_cls):
    if not isinstance(raw, list):
        return []
    return [component_cls.from_dict(item) for item in raw if isinstance(item, dict)]


@dataclass
class Recipe:
    """A bread-dough formulation in baker's percentages."""
    name: str
    flour_weight: float
    desired_hydration_percentage: float
    salt_percentage: float
    yeast_percentage: float
    use_detailed_flour_composition: bool = False
    flour_composition: list = field(default_factory=list)
    use_custom_liquid_blend: bool = False
    liquid_composition: list = field(default_factory=list)
    amendments: list = field(default_factory=list)
    use_sugar: bool = False
    sugar_percentage: float = 5.0
    use_egg: bool = False
    egg_count: int = 1
    use_butter: bool = False
    butter_percentage: float = 10.0
    use_oil: bool = False
    oil_percentage: float = 3.0
    pinned: bool = False
    updated_at: int = None

    @classmethod
    def default(cls):
        """A fresh copy of the built-in default recipe."""
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, record, defaults=None):
        """
        Build a recipe from a stored record.

        Every key missing from ``record`` (or stored as null) is taken from
        ``defaults`` so an old or partial record never leaves a derived
        value undefined. Numeric fields are clamped to their limits.

        Args:
            record: Stored recipe dict (camelCase keys)
            defaults: Record supplying missing keys (default: DEFAULT_RECIPE)

        Returns:
            Recipe
        """
        if defaults is None:
            defaults = DEFAULT_RECIPE
        present = {k: v for k, v in (record or {}).items() if v is not None}

        # Records written before the hydration target existed stored the
        # added-water percentage instead
        if 'desiredHydrationPercentage' not in present and 'waterPercentage' in present:
            present['desiredHydrationPercentage'] = present['waterPercentage']

        data = dict(defaults)
        data.update(present)

        # Missing keys take the default; present but unparsable values fall
        # to the lower bound of the field
        def number(key):
            if key in present:
                return clamp_field(key, present[key], default=FIELD_LIMITS[key][0])
            return clamp_field(key, defaults.get(key))

        if 'eggCount' in present:
            egg_count = clamp_count('eggCount', present['eggCount'])
        else:
            egg_count = clamp_count('eggCount', defaults.get('eggCount'), default=1)

        use_detailed = _as_bool(data.get('useDetailedFlourComposition'))
        flour_composition = _components(data.get('flourComposition'), FlourComponent)
        # A detailed blend is never left without flours
        if use_detailed and not flour_composition:
            flour_composition = default_flour_components()

        updated_at = data.get('updatedAt')
        return cls(
            name=sanitize_recipe_name(data.get('name')),
            flour_weight=number('flourWeight'),
            desired_hydration_percentage=number('desiredHydrationPercentage'),
            salt_percentage=number('saltPercentage'),
            yeast_percentage=number('yeastPercentage'),
            use_detailed_flour_composition=use_detailed,
            flour_composition=flour_composition,
            use_custom_liquid_blend=_as_bool(data.get('useCustomLiquidBlend')),
            liquid_composition=_components(data.get('liquidComposition'), LiquidComponent),
            amendments=_components(data.get('amendments'), Amendment),
            use_sugar=_as_bool(data.get('useSugar')),
            sugar_percentage=number('sugarPercentage'),
            use_egg=_as_bool(data.get('useEgg')),
            egg_count=egg_count,
            use_butter=_as_bool(data.get('useButter')),
            butter_percentage=number('butterPercentage'),
            use_oil=_as_bool(data.get('useOil')),
            oil_percentage=number('oilPercentage'),
            pinned=_as_bool(data.get('pinned')),
            updated_at=safe_int(updated_at, default=None) if updated_at is not None else None,
        )

    def to_dict(self):
        """Serialize to the stored record shape."""
        record = {
            'name': self.name,
            'flourWeight': self.flour_weight,
            'desiredHydrationPercentage': self.desired_hydration_percentage,
            'saltPercentage': self.salt_percentage,
            'yeastPercentage': self.yeast_percentage,
            'useDetailedFlourComposition': self.use_detailed_flour_composition,
            'useCustomLiquidBlend': self.use_custom_liquid_blend,
            'liquidComposition': [c.to_dict() for c in self.liquid_composition],
            'amendments': [a.to_dict() for a in self.amendments],
            'useSugar': self.use_sugar,
            'sugarPercentage': self.sugar_percentage,
            'useEgg': self.use_egg,
            'eggCount': self.egg_count,
            'useButter': self.use_butter,
            'butterPercentage': self.butter_percentage,
            'useOil': self.use_oil,
            'oilPercentage': self.oil_percentage,
            'pinned': self.pinned,
        }
        # The composition only exists while the detailed blend is on
        if self.use_detailed_flour_composition:
            record['flourComposition'] = [c.to_dict() for c in self.flour_composition]
        if self.updated_at is not None:
            record['updatedAt'] = self.updated_at
        return record

    def copy(self, **changes):
        """Copy with changes applied; component lists are copied too."""
        duplicate = replace(
            self,
            flour_composition=[replace(c) for c in self.flour_composition],
            liquid_composition=[replace(c) for c in self.liquid_composition],
            amendments=[replace(a) for a in self.amendments],
        )
        return replace(duplicate, **changes) if changes else duplicate
