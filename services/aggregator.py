"""
Recipe Aggregation Service

Combines flour blend, water budget, additives and amendments into the
final ingredient list and the dough totals. The ingredient list order is
shared by the editor, the print view and the export payload.
"""

from dataclasses import dataclass, field, replace

from constants import INGREDIENT_LABELS
from models.recipe import Amendment, new_id
from utils.numeric import clamp_field
from utils.sanitizer import sanitize_amendment_name
from .conversion import percentage_from_weight, weight_from_percentage
from .flour_blend import normalize_flour_blend
from .hydration import resolve_hydration, total_egg_weight


@dataclass(frozen=True)
class IngredientLine:
    name: str
    quantity: str
    weight: float = 0.0

    def to_dict(self):
        return {'name': self.name, 'quantity': self.quantity}


@dataclass
class DoughCalculation:
    flour_weight: float
    flour_blend: list
    hydration: object
    salt_weight: float
    yeast_weight: float
    sugar_weight: float
    egg_weight: float
    butter_weight: float
    oil_weight: float
    amendments_weight: float
    total_dough_weight: float
    overall_hydration: float
    realized_hydration: float
    ingredients: list = field(default_factory=list)

    def to_dict(self):
        return {
            'flourWeight': self.flour_weight,
            'flourBlend': [
                {'id': e.id, 'name': e.name, 'percentage': e.percentage, 'weight': e.weight}
                for e in self.flour_blend
            ],
            'totalLiquidTarget': self.hydration.total_liquid_target,
            'netAddedWater': self.hydration.net_added_water,
            'eggCount': self.hydration.egg_count,
            'waterFromEggs': self.hydration.water_from_eggs,
            'liquidBlendWeight': self.hydration.liquid_blend_weight,
            'saltWeight': self.salt_weight,
            'yeastWeight': self.yeast_weight,
            'sugarWeight': self.sugar_weight,
            'eggWeight': self.egg_weight,
            'butterWeight': self.butter_weight,
            'oilWeight': self.oil_weight,
            'amendmentsWeight': self.amendments_weight,
            'totalDoughWeight': self.total_dough_weight,
            'overallHydration': self.overall_hydration,
            'realizedHydration': self.realized_hydration,
            'ingredients': [line.to_dict() for line in self.ingredients],
        }


# ============================================
# QUANTITY FORMATTING
# ============================================

def format_quantity(grams, decimals=1):
    """Format a weight for display, e.g. ``format_quantity(10) -> '10.0g'``."""
    return f"{grams:.{decimals}f}g"


def format_yeast_quantity(grams):
    """Yeast is small enough that fractions of a gram matter."""
    if float(grams).is_integer():
        return format_quantity(grams, 1)
    return format_quantity(grams, 2)


# ============================================
# CALCULATION
# ============================================

def _optional_weight(enabled, flour_weight, percentage):
    return weight_from_percentage(flour_weight, percentage) if enabled else 0.0


def calculate_dough(recipe):
    """
    Calculate every component weight and the dough totals.

    Displayed hydration echoes the target (0 without flour); it is not
    recomputed from the realized weights. ``realized_hydration`` reports
    the actual figure, which exceeds the target when eggs or the liquid
    blend alone supply more water than asked for.
    """
    flour_weight = recipe.flour_weight
    hydration = resolve_hydration(recipe)

    salt_weight = weight_from_percentage(flour_weight, recipe.salt_percentage)
    yeast_weight = weight_from_percentage(flour_weight, recipe.yeast_percentage)
    sugar_weight = _optional_weight(recipe.use_sugar, flour_weight, recipe.sugar_percentage)
    butter_weight = _optional_weight(recipe.use_butter, flour_weight, recipe.butter_percentage)
    oil_weight = _optional_weight(recipe.use_oil, flour_weight, recipe.oil_percentage)
    egg_weight = total_egg_weight(hydration.egg_count)
    amendments_weight = float(sum(max(a.weight, 0.0) for a in recipe.amendments))

    total_dough_weight = (
        flour_weight + hydration.net_added_water + salt_weight + yeast_weight
        + sugar_weight + egg_weight + butter_weight + oil_weight
        + hydration.liquid_blend_weight + amendments_weight
    )

    realized_water = (hydration.net_added_water + hydration.water_from_eggs
                      + hydration.liquid_blend_weight)

    calculation = DoughCalculation(
        flour_weight=flour_weight,
        flour_blend=normalize_flour_blend(flour_weight, recipe.flour_composition,
                                          recipe.use_detailed_flour_composition),
        hydration=hydration,
        salt_weight=salt_weight,
        yeast_weight=yeast_weight,
        sugar_weight=sugar_weight,
        egg_weight=egg_weight,
        butter_weight=butter_weight,
        oil_weight=oil_weight,
        amendments_weight=amendments_weight,
        total_dough_weight=total_dough_weight,
        overall_hydration=recipe.desired_hydration_percentage if flour_weight > 0 else 0.0,
        realized_hydration=percentage_from_weight(flour_weight, realized_water),
    )
    calculation.ingredients = build_ingredient_list(recipe, calculation)
    return calculation


def build_ingredient_list(recipe, calculation):
    """
    Flat ingredient list in display order.

    Flours, added water, eggs, custom liquids, salt, yeast, sugar, butter,
    oil, then named amendments. Zero-weight optional lines are left out.
    """
    lines = []
    hydration = calculation.hydration

    for entry in calculation.flour_blend:
        if entry.weight > 0:
            lines.append(IngredientLine(entry.name, format_quantity(entry.weight), entry.weight))

    if hydration.net_added_water > 0:
        lines.append(IngredientLine(INGREDIENT_LABELS['water'],
                                    format_quantity(hydration.net_added_water),
                                    hydration.net_added_water))

    if recipe.use_egg and hydration.water_from_eggs > 0:
        label = (f"{INGREDIENT_LABELS['eggs']} ({hydration.egg_count}, "
                 f"~{hydration.water_from_eggs:.1f}g water)")
        lines.append(IngredientLine(label, format_quantity(calculation.egg_weight, 0),
                                    calculation.egg_weight))

    if recipe.use_custom_liquid_blend:
        for liquid in recipe.liquid_composition:
            if liquid.weight > 0:
                lines.append(IngredientLine(liquid.name, format_quantity(liquid.weight),
                                            liquid.weight))

    lines.append(IngredientLine(INGREDIENT_LABELS['salt'],
                                format_quantity(calculation.salt_weight),
                                calculation.salt_weight))
    lines.append(IngredientLine(INGREDIENT_LABELS['yeast'],
                                format_yeast_quantity(calculation.yeast_weight),
                                calculation.yeast_weight))

    for key, enabled, weight in (
        ('sugar', recipe.use_sugar, calculation.sugar_weight),
        ('butter', recipe.use_butter, calculation.butter_weight),
        ('oil', recipe.use_oil, calculation.oil_weight),
    ):
        if enabled and weight > 0:
            lines.append(IngredientLine(INGREDIENT_LABELS[key], format_quantity(weight), weight))

    for amendment in recipe.amendments:
        if amendment.name.strip() and amendment.weight > 0:
            lines.append(IngredientLine(amendment.name, format_quantity(amendment.weight),
                                        amendment.weight))

    return lines


def export_recipe(recipe, calculation=None):
    """Print/export payload: the recipe name and its ordered ``{name, quantity}`` pairs."""
    if calculation is None:
        calculation = calculate_dough(recipe)
    return {
        'name': recipe.name,
        'ingredients': [line.to_dict() for line in calculation.ingredients],
    }


# ============================================
# AMENDMENTS
# ============================================

def add_amendment(amendments, name='', weight=0.0):
    return list(amendments) + [
        Amendment(id=new_id(), name=sanitize_amendment_name(name),
                  weight=clamp_field('amendmentWeight', weight))
    ]


def update_amendment(amendments, amendment_id, name=None, weight=None):
    updated = []
    for amendment in amendments:
        if amendment.id == amendment_id:
            changes = {}
            if name is not None:
                changes['name'] = sanitize_amendment_name(name)
            if weight is not None:
                changes['weight'] = clamp_field('amendmentWeight', weight)
            amendment = replace(amendment, **changes)
        updated.append(amendment)
    return updated


def remove_amendment(amendments, amendment_id):
    return [a for a in amendments if a.id != amendment_id]
