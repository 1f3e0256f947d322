"""
Editor Form Parsing

Turns the editor's posted form into a draft Recipe. Components are posted
as indexed field groups, e.g. ``flour-0-id``, ``flour-0-name``,
``flour-0-share``. Numbers go through the clamping helpers, so a bad
field never fails the request.
"""

from models.recipe import Recipe
from utils.numeric import clamp_field

NUMBER_FIELDS = (
    'flourWeight',
    'desiredHydrationPercentage',
    'saltPercentage',
    'yeastPercentage',
    'sugarPercentage',
    'eggCount',
    'butterPercentage',
    'oilPercentage',
)

TOGGLE_FIELDS = (
    'useDetailedFlourComposition',
    'useCustomLiquidBlend',
    'useSugar',
    'useEgg',
    'useButter',
    'useOil',
)


def _checked(form, key):
    return form.get(key) in ('on', '1', 'true', 'True', 'yes')


def _indexed_groups(form, prefix):
    """Yield the field groups ``prefix-0-*``, ``prefix-1-*``... until one is missing."""
    index = 0
    while f'{prefix}-{index}-id' in form:
        yield lambda field, i=index: form.get(f'{prefix}-{i}-{field}')
        index += 1


def record_from_form(form):
    """
    Build a stored-record dict from a posted editor form.

    Args:
        form: Mapping with ``get`` and ``in`` (request.form)

    Returns:
        Record dict suitable for Recipe.from_dict
    """
    record = {'name': form.get('name', '')}

    for key in NUMBER_FIELDS:
        if key in form:
            record[key] = form.get(key)

    for key in TOGGLE_FIELDS:
        record[key] = _checked(form, key)

    record['flourComposition'] = [
        {
            'id': get('id'),
            'name': get('name'),
            'shareValue': get('share'),
            'isCustom': get('custom') == '1',
            'isPredefined': get('predefined') == '1',
        }
        for get in _indexed_groups(form, 'flour')
    ]
    record['liquidComposition'] = [
        {
            'id': get('id'),
            'name': get('name'),
            'weight': get('weight'),
            'isCustom': get('custom') == '1',
            'isPredefined': get('predefined') == '1',
        }
        for get in _indexed_groups(form, 'liquid')
    ]
    record['amendments'] = [
        {'id': get('id'), 'name': get('name'), 'weight': get('weight')}
        for get in _indexed_groups(form, 'amendment')
    ]
    return record


def recipe_from_form(form, defaults=None):
    return Recipe.from_dict(record_from_form(form), defaults)


def recipe_from_json(data, defaults=None):
    """Draft recipe from a JSON body; anything that is not an object gives the defaults."""
    if not isinstance(data, dict):
        data = {}
    return Recipe.from_dict(data, defaults)


def previous_flour_weight(form):
    """Flour weight the editor was rendered with, or None on a fresh form."""
    if 'previousFlourWeight' not in form:
        return None
    return clamp_field('flourWeight', form.get('previousFlourWeight'))
