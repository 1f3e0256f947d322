"""
Smoke tests for the dough calculator app.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('FLASK_ENV', 'testing')

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app, db
    assert app is not None
    assert db is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import Recipe, FlourComponent, LiquidComponent, Amendment, Settings
    assert Recipe is not None
    assert Settings is not None
    print("OK: Models import successfully")

def test_engine_import():
    """Verify the calculation engine can be imported."""
    from services import calculate_dough, normalize_flour_blend, resolve_hydration, RecipeStore
    assert callable(calculate_dough)
    assert callable(normalize_flour_blend)
    assert callable(resolve_hydration)
    print("OK: Engine imports successfully")

def test_egg_constants_unchanged():
    """Verify egg constants have expected values."""
    from constants import EGG_UNIT_WEIGHT_G, EGG_WATER_FRACTION, FLOUR_PER_EGG_G

    # These values must not change
    assert EGG_UNIT_WEIGHT_G == 50
    assert EGG_WATER_FRACTION == 0.75
    assert FLOUR_PER_EGG_G == 300
    print("OK: Egg constants unchanged")

def test_default_recipe_calculates():
    """Verify the default recipe produces the expected dough."""
    from models import Recipe
    from services import calculate_dough

    calc = calculate_dough(Recipe.default())
    assert abs(calc.total_dough_weight - 672.0) < 1e-9
    print("OK: Default recipe calculates")

def test_app_runs():
    """Verify app can create test client."""
    from app import app, init_db
    app.config['TESTING'] = True
    init_db()
    with app.test_client() as client:
        response = client.get('/')
        assert response.status_code == 200
        print("OK: App serves home page")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_engine_import,
        test_egg_constants_unchanged,
        test_default_recipe_calculates,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
