"""
Validation Constants

Bounds applied to every numeric recipe field. Out-of-range input is
clamped to the nearest bound, never rejected.
"""

# field -> (min, max); None means unbounded
FIELD_LIMITS = {
    'flourWeight': (0, None),
    'desiredHydrationPercentage': (0, 150),
    'saltPercentage': (0, 5),
    'yeastPercentage': (0, 3),
    'sugarPercentage': (0, 100),
    'butterPercentage': (0, 100),
    'oilPercentage': (0, 100),
    'eggCount': (0, 48),
    'shareValue': (0, 100),
    'liquidWeight': (0, None),
    'amendmentWeight': (0, None),
}

# Maximum field lengths
MAX_LENGTHS = {
    'recipe_name': 100,
    'component_name': 100,
    'amendment_name': 200,
}
