"""
Dough Constants

Egg constants, the default recipe, and the predefined flour and liquid
sets used when a blend is switched on or emptied.
"""

# Average large egg weight in grams
EGG_UNIT_WEIGHT_G = 50

# Share of an egg's weight that counts as water
EGG_WATER_FRACTION = 0.75

# One egg per this many grams of flour when eggs are switched on
FLOUR_PER_EGG_G = 300

# Key of the key-value slot that holds the recipe collection
RECIPE_STORE_KEY = 'doughMasterRecipes'

# Route token meaning "no recipe loaded, start from defaults"
RESERVED_RECIPE_NAME = 'new'

# Name of the synthetic blend entry shown when no detailed composition is used
TOTAL_FLOUR_ID = 'flour-total'
TOTAL_FLOUR_NAME = 'Flour (Total)'

# Stored-record shape of the default recipe. Loading a partial record
# back-fills every missing key from here.
DEFAULT_RECIPE = {
    'name': 'Basic Bread',
    'flourWeight': 400,
    'desiredHydrationPercentage': 65,
    'saltPercentage': 2,
    'yeastPercentage': 1,
    'useDetailedFlourComposition': False,
    'flourComposition': [],
    'useCustomLiquidBlend': False,
    'liquidComposition': [],
    'amendments': [],
    'useSugar': False,
    'sugarPercentage': 5,
    'useEgg': False,
    'eggCount': 1,
    'useButter': False,
    'butterPercentage': 10,
    'useOil': False,
    'oilPercentage': 3,
    'pinned': False,
}

# (name, share) pairs; the first flour carries the whole blend
DEFAULT_FLOUR_SET = (
    ('Bread Flour', 100),
    ('Whole Wheat Flour', 0),
    ('Rye Flour', 0),
    ('Spelt Flour', 0),
)

# (name, grams) pairs offered when a custom liquid blend is switched on
DEFAULT_LIQUID_SET = (
    ('Milk', 0),
    ('Buttermilk', 0),
    ('Beer', 0),
)

# Display names used in the ingredient list
INGREDIENT_LABELS = {
    'water': 'Water',
    'salt': 'Salt',
    'yeast': 'Yeast',
    'sugar': 'Sugar',
    'eggs': 'Eggs',
    'butter': 'Butter',
    'oil': 'Oil',
}
