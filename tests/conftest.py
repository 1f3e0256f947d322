"""
Shared fixtures for the dough calculator tests.
"""

import itertools
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ['FLASK_ENV'] = 'testing'

from models import Recipe, FlourComponent, LiquidComponent, Amendment  # noqa: E402
from services import InMemoryRecipeRepository, RecipeStore  # noqa: E402


@pytest.fixture
def repository():
    return InMemoryRecipeRepository()


@pytest.fixture
def clock():
    """Strictly increasing fake millisecond clock."""
    ticks = itertools.count(1_000)
    return lambda: next(ticks)


@pytest.fixture
def store(repository, clock):
    return RecipeStore(repository, clock=clock)


@pytest.fixture
def make_recipe():
    """Build a recipe from stored-record keys on top of the defaults."""
    def _make(**fields):
        return Recipe.from_dict(fields)
    return _make


@pytest.fixture
def flour():
    def _flour(name, share, predefined=True, id=None):
        return FlourComponent(id=id or name.lower().replace(' ', '-'), name=name,
                              share_value=share, is_custom=not predefined,
                              is_predefined=predefined)
    return _flour


@pytest.fixture
def liquid():
    def _liquid(name, weight, id=None):
        return LiquidComponent(id=id or name.lower(), name=name, weight=weight,
                               is_custom=True, is_predefined=False)
    return _liquid


@pytest.fixture
def amendment():
    def _amendment(name, weight, id=None):
        return Amendment(id=id or (name.lower() or 'blank') + str(weight), name=name, weight=weight)
    return _amendment


@pytest.fixture
def app():
    from app import app as flask_app
    from models import db

    flask_app.config.update(TESTING=True)
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
